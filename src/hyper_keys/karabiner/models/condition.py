from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel


class ConditionType(str, Enum):
    """Karabiner condition type."""
    VARIABLE_IF = 'variable_if'


class BaseCondition(BaseModel):
    """Karabiner condition model."""

    type: ConditionType


class VarCondition(BaseCondition):
    """
    https://karabiner-elements.pqrs.org/docs/json/complex-modifications-manipulator-definition/conditions/variable/
    """

    type: Literal[ConditionType.VARIABLE_IF] = ConditionType.VARIABLE_IF
    name: str
    value: str | int | bool
