from __future__ import annotations

from typing import Optional

from .dsl import parse_keychord
from .ir import Command, Shell


def shell(command: str, description: Optional[str] = None) -> Command:
    """Run `command` in a shell."""

    return Command(actions=(Shell(command=command),), description=description)


def open_(what: str) -> Command:
    """Shortcut for the macOS `open` command (URLs, files, `-a` apps, ...)."""

    return shell(f"open {what}", description=f"Open {what}")


def app(name: str) -> Command:
    """Shortcut for opening an application by name."""

    return open_(f"-a '{name}.app'")


def key(expr: str, description: Optional[str] = None) -> Command:
    """Emit a key chord, e.g. `key("command+shift+left_arrow")`."""

    return Command(actions=(parse_keychord(expr),), description=description)
