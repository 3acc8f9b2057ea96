from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping
import tomllib

from . import commands
from .config import CommandConfig, Config, ToEventConfig
from .dsl import normalize_aliases, normalize_key, parse_keychord
from .ir import Action, Command, ConsumerKey, KeyCode, KeyPress, Leaf, Modifier, RootSpec, Shell, Sublayer, VendorKey

logger = logging.getLogger(__name__)


class LayerFrontend:
    """Parse config (TOML) into a RootSpec of hyper key layers."""

    def load_toml(self, path: str | Path) -> Dict[str, Any]:
        """Load a TOML config file into a dict."""

        path = Path(path)
        return tomllib.loads(path.read_text(encoding="utf-8"))

    def parse_config(self, config: Mapping[str, Any] | Config) -> RootSpec:
        cfg = config if isinstance(config, Config) else Config.model_validate(config)

        alias_key = normalize_aliases(cfg.alias.key)
        alias_mod = normalize_aliases(cfg.alias.mod)

        layers: Dict[KeyCode, Leaf | Sublayer] = {}
        for layer in cfg.layer:
            key = _resolve_key(layer.key, alias_key)
            if key in layers:
                raise ValueError(f"duplicate layer key: {key!r}")

            if layer.command is not None:
                layers[key] = Leaf(command=_parse_command(layer.command, alias_key, alias_mod))
                continue

            sub: Dict[KeyCode, Command] = {}
            for raw_key, command_cfg in (layer.commands or {}).items():
                command_key = _resolve_key(raw_key, alias_key)
                if command_key in sub:
                    raise ValueError(f"duplicate command key {command_key!r} in layer {key!r}")
                sub[command_key] = _parse_command(command_cfg, alias_key, alias_mod)
            layers[key] = Sublayer(commands=sub)

        logger.debug("parsed %d layers", len(layers))
        return RootSpec(layers=layers)


def _resolve_key(raw: str, alias_key: Mapping[str, str]) -> KeyCode:
    key = normalize_key(raw)
    return alias_key.get(key, key)


def _parse_command(
    cfg: CommandConfig,
    alias_key: Mapping[str, str],
    alias_mod: Mapping[str, str],
) -> Command:
    if cfg.app is not None:
        command = commands.app(cfg.app)
    elif cfg.open is not None:
        command = commands.open_(cfg.open)
    elif cfg.shell is not None:
        command = commands.shell(cfg.shell)
    elif cfg.emit is not None:
        command = Command(actions=(parse_keychord(cfg.emit, alias_key=alias_key, alias_mod=alias_mod),))
    else:
        command = Command(actions=tuple(_parse_to_event(event, alias_key, alias_mod) for event in cfg.to or []))

    if cfg.description is not None:
        command = command.model_copy(update={"description": cfg.description})
    return command


def _parse_to_event(
    cfg: ToEventConfig,
    alias_key: Mapping[str, str],
    alias_mod: Mapping[str, str],
) -> Action:
    if cfg.key_code is not None:
        return KeyPress(
            key_code=_resolve_key(cfg.key_code, alias_key),
            modifiers=tuple(Modifier(_resolve_key(mod, alias_mod)) for mod in cfg.modifiers),
        )
    if cfg.consumer_key_code is not None:
        return ConsumerKey(code=cfg.consumer_key_code)
    if cfg.apple_vendor_keyboard_key_code is not None:
        return VendorKey(code=cfg.apple_vendor_keyboard_key_code)
    return Shell(command=cfg.shell_command)
