from __future__ import annotations

from pathlib import Path
import argparse
import logging

from pydantic import BaseModel

from hyper_keys.layer.config import Config
from hyper_keys.layer.dsl import normalize_aliases
from hyper_keys.layer.frontend import LayerFrontend

from .backend import KarabinerBackend
from .function_keys import function_keys
from .layout import KeyTranslation
from .models.rule import ComplexModifications, ProfileFragment, RuleSet

logger = logging.getLogger(__name__)

FORMATS = ("rules", "profile")


def build_output(config: Config, *, fmt: str = "rules", title: str | None = None) -> BaseModel:
    """Compile a validated config into the Karabiner model for `fmt`."""

    if fmt not in FORMATS:
        raise ValueError(f"unknown output format: {fmt!r} (expected one of: {', '.join(FORMATS)})")

    root = LayerFrontend().parse_config(config)
    backend = KarabinerBackend(
        translation=KeyTranslation.for_layout(config.layout, normalize_aliases(config.remap)),
        hyper=config.hyper,
    )
    rules = backend.compile(root)

    if fmt == "profile":
        return ProfileFragment(
            complex_modifications=ComplexModifications(rules=rules),
            fn_function_keys=function_keys() if config.fn_function_keys else [],
        )
    return RuleSet(
        title=title or config.title or config.description or "Hyper key sublayers",
        rules=rules,
    )


def compile_toml_config(
    in_path: str | Path,
    out_path: str | Path,
    *,
    indent: int | None = 2,
    fmt: str = "rules",
    title: str | None = None,
) -> None:
    """End-to-end compilation: TOML file -> Karabiner JSON file."""

    in_path = Path(in_path)
    out_path = Path(out_path)

    frontend = LayerFrontend()
    config = Config.model_validate(frontend.load_toml(in_path))
    output = build_output(config, fmt=fmt, title=title)

    json_str = output.model_dump_json(indent=indent, by_alias=True, exclude_none=True)
    out_path.write_text(json_str + "\n", encoding="utf-8")
    logger.info("wrote %s", out_path)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate Karabiner hyper key sublayer rules from a layer config toml."
    )
    parser.add_argument("config", help="Layer config toml path (e.g. layers.toml)")
    parser.add_argument("out", help="Output Karabiner json path")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=FORMATS,
        default="rules",
        help="rules: complex modifications asset; profile: profile fragment (default: rules)",
    )
    parser.add_argument("--title", help="Asset title for --format rules")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log compilation details")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    compile_toml_config(args.config, args.out, indent=args.indent, fmt=args.fmt, title=args.title)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
