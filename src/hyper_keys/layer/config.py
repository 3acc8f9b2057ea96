from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .ir import HYPER, Modifier


class AliasConfig(BaseModel):
    key: Dict[str, str] = Field(default_factory=dict)
    mod: Dict[str, str] = Field(default_factory=dict)


class ToEventConfig(BaseModel):
    """Raw Karabiner-style `to` entry; exactly one event kind per entry."""

    model_config = ConfigDict(extra="forbid")

    key_code: Optional[str] = None
    modifiers: List[str] = Field(default_factory=list)
    consumer_key_code: Optional[str] = None
    apple_vendor_keyboard_key_code: Optional[str] = None
    shell_command: Optional[str] = None

    @model_validator(mode="after")
    def _one_event(self) -> ToEventConfig:
        kinds = [
            name
            for name in ("key_code", "consumer_key_code", "apple_vendor_keyboard_key_code", "shell_command")
            if getattr(self, name) is not None
        ]
        if len(kinds) != 1:
            raise ValueError(f"to entry must set exactly one event kind, got: {kinds or 'none'}")
        if self.modifiers and self.key_code is None:
            raise ValueError("modifiers are only allowed together with key_code")
        return self


class CommandConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    app: Optional[str] = None
    open: Optional[str] = None
    shell: Optional[str] = None
    emit: Optional[str] = None
    to: Optional[List[ToEventConfig]] = None
    description: Optional[str] = None

    @model_validator(mode="after")
    def _one_action(self) -> CommandConfig:
        kinds = [name for name in ("app", "open", "shell", "emit", "to") if getattr(self, name) is not None]
        if len(kinds) != 1:
            raise ValueError(f"command must set exactly one of app/open/shell/emit/to, got: {kinds or 'none'}")
        return self


class LayerConfig(BaseModel):
    """One root entry: a direct `command`, or a sublayer of `commands`."""

    model_config = ConfigDict(extra="forbid")

    key: str
    command: Optional[CommandConfig] = None
    commands: Optional[Dict[str, CommandConfig]] = None

    @model_validator(mode="after")
    def _leaf_or_sublayer(self) -> LayerConfig:
        if (self.command is None) == (self.commands is None):
            raise ValueError(f"layer {self.key!r} must set exactly one of command/commands")
        return self


class Config(BaseModel):
    version: int | None = None
    title: str | None = None
    description: str | None = None
    layout: str = "qwerty"
    hyper: List[Modifier] = Field(default_factory=lambda: list(HYPER))
    fn_function_keys: bool = False
    alias: AliasConfig = Field(default_factory=AliasConfig)
    remap: Dict[str, str] = Field(default_factory=dict)
    layer: List[LayerConfig] = Field(default_factory=list)
