from __future__ import annotations

from typing import Iterable, Mapping

from .ir import KeyCode, KeyPress, Modifier


_MODIFIER_TOKENS = {m.value for m in Modifier}


def normalize_key(token: str) -> KeyCode:
    """Canonical form of a key token as written in configs (`" F6 "` -> `"f6"`)."""

    key = str(token).strip().lower()
    if not key:
        raise ValueError("key is empty")
    return KeyCode(key)


def normalize_aliases(aliases: Mapping[str, str] | None) -> dict[str, str]:
    if not aliases:
        return {}
    return {str(k).strip().lower(): str(v).strip().lower() for k, v in aliases.items()}


def _tokenize(expr: str, *, chord_sep: str) -> list[str]:
    expr = expr.strip()
    if not expr:
        raise ValueError("expression is empty")

    tokens = [t.strip().lower() for t in expr.split(chord_sep)]
    if any(not t for t in tokens):
        raise ValueError(f"invalid expression (empty token): {expr!r}")
    return tokens


def _apply_alias(token: str, *, alias_key: Mapping[str, str], alias_mod: Mapping[str, str]) -> str:
    if token in alias_mod:
        token = alias_mod[token]
    if token in alias_key:
        token = alias_key[token]
    return token


def _split_mods_and_keys(tokens: Iterable[str]) -> tuple[list[KeyCode], list[Modifier]]:
    keys: list[KeyCode] = []
    modifiers: list[Modifier] = []
    for token in tokens:
        if token in _MODIFIER_TOKENS:
            mod = Modifier(token)
            if mod not in modifiers:
                modifiers.append(mod)
        else:
            keys.append(KeyCode(token))
    return keys, modifiers


def parse_keychord(
    expr: str,
    *,
    alias_key: Mapping[str, str] | None = None,
    alias_mod: Mapping[str, str] | None = None,
    chord_sep: str = "+",
    translate: bool = False,
) -> KeyPress:
    """Parse an emitted chord expression (`"command+shift+left_arrow"`) into a KeyPress."""

    alias_key = normalize_aliases(alias_key)
    alias_mod = normalize_aliases(alias_mod)

    tokens = [
        _apply_alias(t, alias_key=alias_key, alias_mod=alias_mod)
        for t in _tokenize(expr, chord_sep=chord_sep)
    ]
    keys, modifiers = _split_mods_and_keys(tokens)
    if len(keys) != 1:
        raise ValueError(f"emit expression must have exactly one key: {expr!r}")

    return KeyPress(key_code=keys[0], modifiers=tuple(modifiers), translate=translate)
