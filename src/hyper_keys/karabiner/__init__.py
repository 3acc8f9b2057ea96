from __future__ import annotations

from .backend import KarabinerBackend
from .layout import KeyTranslation
from .models.condition import ConditionType, VarCondition
from .models.from_event import FromEvent
from .models.key_code import KeyCode
from .models.manipulator import Manipulator, SimpleModification
from .models.rule import ProfileFragment, Rule, RuleSet
from .models.to_event import ToEvent

__all__ = [
    "ConditionType",
    "FromEvent",
    "KarabinerBackend",
    "KeyCode",
    "KeyTranslation",
    "Manipulator",
    "ProfileFragment",
    "Rule",
    "RuleSet",
    "SimpleModification",
    "ToEvent",
    "VarCondition",
]
