from __future__ import annotations

import pytest

from hyper_keys.karabiner.function_keys import DEFAULT_FUNCTION_KEYS, function_keys
from hyper_keys.karabiner.layout import COLEMAK, KeyTranslation
from hyper_keys.layer.commands import app, key, open_
from hyper_keys.layer.dsl import parse_keychord
from hyper_keys.layer.ir import KeyPress, Modifier, Shell


def test_translation_falls_back_to_key() -> None:
    translation = KeyTranslation({"o": "semicolon"})

    assert translation.translate("o") == "semicolon"
    assert translation.translate("f6") == "f6"
    assert "o" in translation
    assert "f6" not in translation


def test_translation_for_layout() -> None:
    assert KeyTranslation.for_layout("qwerty").translate("o") == "o"

    colemak = KeyTranslation.for_layout("colemak", {"caps": "caps_lock"})
    assert colemak.translate("o") == "semicolon"
    assert colemak.translate("caps") == "caps_lock"
    assert colemak.translate("a") == "a"


def test_translation_unknown_layout() -> None:
    with pytest.raises(ValueError, match="unknown layout"):
        KeyTranslation.for_layout("azerty")


def test_colemak_table_is_a_permutation() -> None:
    assert sorted(COLEMAK) == sorted(COLEMAK.values())


def test_command_helpers() -> None:
    assert open_("https://github.com").actions == (Shell(command="open https://github.com"),)
    assert open_("https://github.com").description == "Open https://github.com"
    assert app("Slack").actions == (Shell(command="open -a 'Slack.app'"),)
    assert key("command+shift+left_arrow").actions == (
        KeyPress(key_code="left_arrow", modifiers=(Modifier.COMMAND, Modifier.SHIFT)),
    )


def test_parse_keychord() -> None:
    assert parse_keychord(" Option + Tab ") == KeyPress(key_code="tab", modifiers=(Modifier.OPTION,))
    assert parse_keychord("left_command+left_command+h").modifiers == (Modifier.LEFT_COMMAND,)

    assert parse_keychord("cmd+Space", alias_key={"space": "spacebar"}, alias_mod={"cmd": "command"}) == KeyPress(
        key_code="spacebar", modifiers=(Modifier.COMMAND,)
    )

    with pytest.raises(ValueError, match="empty"):
        parse_keychord("command++h")
    with pytest.raises(ValueError, match="exactly one key"):
        parse_keychord("command+shift")


def test_function_keys_default_table() -> None:
    entries = function_keys()

    assert [e.from_.key_code for e in entries] == list(DEFAULT_FUNCTION_KEYS)
    by_key = {e.from_.key_code: e.to[0] for e in entries}
    assert by_key["f3"].apple_vendor_keyboard_key_code == "mission_control"
    assert by_key["f6"].key_code == "f6"
    assert by_key["f12"].consumer_key_code == "volume_increment"


def test_function_keys_rejects_shell() -> None:
    with pytest.raises(ValueError, match="must emit a key"):
        function_keys({"f1": Shell(command="say hi")})
