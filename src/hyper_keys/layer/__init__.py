from __future__ import annotations

from .commands import app, key, open_, shell
from .dsl import parse_keychord
from .frontend import LayerFrontend
from .ir import (
    HYPER,
    Action,
    Command,
    ConsumerKey,
    KeyCode,
    KeyPress,
    Leaf,
    Modifier,
    RootSpec,
    SetVariable,
    Shell,
    Sublayer,
    VendorKey,
)
from .variables import SublayerVariables, variable_name

__all__ = [
    "HYPER",
    "Action",
    "Command",
    "ConsumerKey",
    "KeyCode",
    "KeyPress",
    "LayerFrontend",
    "Leaf",
    "Modifier",
    "RootSpec",
    "SetVariable",
    "Shell",
    "Sublayer",
    "SublayerVariables",
    "VendorKey",
    "app",
    "key",
    "open_",
    "parse_keychord",
    "shell",
    "variable_name",
]
