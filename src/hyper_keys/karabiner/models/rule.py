from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .manipulator import Manipulator, SimpleModification


class Rule(BaseModel):
    """Karabiner top-level rule model."""

    description: str
    manipulators: List[Manipulator]


class RuleSet(BaseModel):
    """Complex modifications asset file (`title` + `rules`)."""

    title: str
    rules: List[Rule]


class ComplexModifications(BaseModel):
    rules: List[Rule] = Field(default_factory=list)


class ProfileFragment(BaseModel):
    """The parts of a Karabiner profile this package generates."""

    complex_modifications: ComplexModifications = Field(default_factory=ComplexModifications)
    fn_function_keys: List[SimpleModification] = Field(default_factory=list)
