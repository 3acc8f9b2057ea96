from __future__ import annotations

from typing import TypeAlias

# https://karabiner-elements.pqrs.org/docs/json/complex-modifications-manipulator-definition/from/key-code/
KeyCode: TypeAlias = str
