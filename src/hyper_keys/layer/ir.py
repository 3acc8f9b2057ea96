from __future__ import annotations

from enum import Enum
from typing import Annotated, Dict, Literal, Optional, Tuple, TypeAlias, Union

from pydantic import BaseModel, ConfigDict, Field


class Modifier(str, Enum):
    """Frontend (platform-agnostic) modifier tokens; must distinguish left/right."""

    COMMAND = "command"
    CONTROL = "control"
    OPTION = "option"
    SHIFT = "shift"
    FN = "fn"
    CAPS_LOCK = "caps_lock"

    LEFT_COMMAND = "left_command"
    LEFT_CONTROL = "left_control"
    LEFT_OPTION = "left_option"
    LEFT_SHIFT = "left_shift"

    RIGHT_COMMAND = "right_command"
    RIGHT_CONTROL = "right_control"
    RIGHT_OPTION = "right_option"
    RIGHT_SHIFT = "right_shift"


KeyCode: TypeAlias = str

# The "hyper" chord every root trigger is bound to.
HYPER: Tuple[Modifier, ...] = (
    Modifier.LEFT_COMMAND,
    Modifier.LEFT_CONTROL,
    Modifier.LEFT_SHIFT,
    Modifier.LEFT_OPTION,
)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class KeyPress(_Frozen):
    """Emit a key code (+ optional modifiers).

    `translate` opts the key code into the same layout translation that
    trigger keys go through.
    """

    kind: Literal["key"] = "key"
    key_code: KeyCode
    modifiers: Tuple[Modifier, ...] = ()
    translate: bool = False


class ConsumerKey(_Frozen):
    """Emit a consumer (media) key code."""

    kind: Literal["consumer"] = "consumer"
    code: str


class VendorKey(_Frozen):
    """Emit an Apple vendor keyboard key code."""

    kind: Literal["vendor"] = "vendor"
    code: str


class Shell(_Frozen):
    """Run a shell command."""

    kind: Literal["shell"] = "shell"
    command: str


class SetVariable(_Frozen):
    """Set a named host variable."""

    kind: Literal["set_variable"] = "set_variable"
    name: str
    value: str | int | bool


Action = Annotated[
    Union[KeyPress, ConsumerKey, VendorKey, Shell, SetVariable],
    Field(discriminator="kind"),
]


class Command(_Frozen):
    """What happens when a key fires: ordered actions + optional description."""

    actions: Tuple[Action, ...]
    description: Optional[str] = None


class Leaf(_Frozen):
    """Root entry bound directly to a command (no sublayer variable)."""

    kind: Literal["leaf"] = "leaf"
    command: Command


class Sublayer(_Frozen):
    """Root entry opening a sublayer: secondary key -> command, one level deep."""

    kind: Literal["sublayer"] = "sublayer"
    commands: Dict[KeyCode, Command] = Field(default_factory=dict)


SublayerSpec = Annotated[Union[Leaf, Sublayer], Field(discriminator="kind")]


class RootSpec(_Frozen):
    """Trigger key -> sublayer spec, in declaration order.

    Fields cannot be reassigned, but `layers` and `Sublayer.commands` are
    plain dicts: build a new RootSpec instead of editing them in place.
    Compilation only reads them.
    """

    layers: Dict[KeyCode, SublayerSpec] = Field(default_factory=dict)
