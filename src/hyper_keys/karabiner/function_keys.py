from __future__ import annotations

from typing import List

from hyper_keys.layer.ir import Action, ConsumerKey, KeyPress, VendorKey

from .models.from_event import FromEvent
from .models.manipulator import SimpleModification
from .models.to_event import ToEvent


# Restores the media row behaviour of Apple keyboards on the f-keys.
DEFAULT_FUNCTION_KEYS: dict[str, Action] = {
    "f1": ConsumerKey(code="display_brightness_decrement"),
    "f2": ConsumerKey(code="display_brightness_increment"),
    "f3": VendorKey(code="mission_control"),
    "f4": VendorKey(code="spotlight"),
    "f5": ConsumerKey(code="dictation"),
    "f6": KeyPress(key_code="f6"),
    "f7": ConsumerKey(code="rewind"),
    "f8": ConsumerKey(code="play_or_pause"),
    "f9": ConsumerKey(code="fast_forward"),
    "f10": ConsumerKey(code="mute"),
    "f11": ConsumerKey(code="volume_decrement"),
    "f12": ConsumerKey(code="volume_increment"),
}


def function_keys(table: dict[str, Action] | None = None) -> List[SimpleModification]:
    """Karabiner `fn_function_keys` entries for `table` (defaults to the Apple media row)."""

    if table is None:
        table = DEFAULT_FUNCTION_KEYS

    result: List[SimpleModification] = []
    for key_code, action in table.items():
        if isinstance(action, ConsumerKey):
            to_event = ToEvent(consumer_key_code=action.code)
        elif isinstance(action, VendorKey):
            to_event = ToEvent(apple_vendor_keyboard_key_code=action.code)
        elif isinstance(action, KeyPress):
            to_event = ToEvent(key_code=action.key_code)
        else:
            raise ValueError(f"function key {key_code!r} must emit a key, got: {type(action).__name__}")
        result.append(SimpleModification(from_=FromEvent(key_code=key_code), to=[to_event]))
    return result
