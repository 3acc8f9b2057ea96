from __future__ import annotations

from typing import Dict, Mapping

from .models.key_code import KeyCode


# Karabiner key codes name physical (ANSI QWERTY) positions. On a Colemak
# layout the letter a user thinks of sits on a different physical key.
COLEMAK: Dict[str, KeyCode] = {
    "f": "e",
    "p": "r",
    "g": "t",
    "j": "y",
    "l": "u",
    "u": "i",
    "y": "o",
    "semicolon": "p",
    "r": "s",
    "s": "d",
    "t": "f",
    "d": "g",
    "n": "j",
    "e": "k",
    "i": "l",
    "o": "semicolon",
    "k": "n",
}

LAYOUTS: Dict[str, Dict[str, KeyCode]] = {
    "qwerty": {},
    "colemak": COLEMAK,
}


class KeyTranslation:
    """Logical key label -> physical Karabiner key code.

    The table may be partial; a key without an entry translates to itself.
    """

    def __init__(self, table: Mapping[str, KeyCode] | None = None) -> None:
        self._table: Dict[str, KeyCode] = dict(table or {})

    @classmethod
    def for_layout(cls, layout: str, extra: Mapping[str, KeyCode] | None = None) -> KeyTranslation:
        try:
            table = LAYOUTS[layout]
        except KeyError:
            raise ValueError(
                f"unknown layout: {layout!r} (expected one of: {', '.join(sorted(LAYOUTS))})"
            ) from None
        return cls({**table, **(extra or {})})

    def translate(self, key: str) -> KeyCode:
        return self._table.get(key, key)

    def __contains__(self, key: object) -> bool:
        return key in self._table
