from __future__ import annotations

import pytest

from hyper_keys.karabiner.backend import KarabinerBackend
from hyper_keys.layer.commands import app, open_, shell
from hyper_keys.layer.ir import Command, KeyPress, Leaf, RootSpec, Sublayer
from hyper_keys.layer.variables import SublayerVariables, variable_name


def _root() -> RootSpec:
    return RootSpec(
        layers={
            "spacebar": Leaf(command=open_("raycast://extensions/raycast/navigation/search-menu-items")),
            "o": Sublayer(commands={"g": app("Google Chrome"), "s": app("Slack"), "t": app("Terminal")}),
            "w": Sublayer(commands={"u": shell("say u")}),
            "f6": Leaf(command=Command(actions=(KeyPress(key_code="f6"),))),
            "s": Sublayer(commands={}),
        }
    )


def test_variable_name() -> None:
    assert variable_name("o") == "hyper_sublayer_o"
    assert variable_name("f6") == "hyper_sublayer_f6"


def test_variables_from_root_skip_leaves() -> None:
    variables = SublayerVariables.from_root(_root())

    assert variables.names == ["hyper_sublayer_o", "hyper_sublayer_w", "hyper_sublayer_s"]
    assert len(variables) == 3
    assert "hyper_sublayer_spacebar" not in variables
    assert "hyper_sublayer_f6" not in variables


def test_variables_others_excludes_own() -> None:
    variables = SublayerVariables(["o", "w", "s"])

    assert variables.others("w") == ["hyper_sublayer_o", "hyper_sublayer_s"]
    # keys outside the registry exclude everything
    assert variables.others("x") == ["hyper_sublayer_o", "hyper_sublayer_w", "hyper_sublayer_s"]


@pytest.mark.parametrize("count", [0, 1, 5])
def test_compile_sublayer_rule_count(count: int) -> None:
    commands = {f"k{i}": shell(f"echo {i}") for i in range(count)}

    manips = KarabinerBackend().compile_sublayer("o", commands, SublayerVariables(["o"]))

    assert len(manips) == count + 1
    assert manips[0].to_after_key_up is not None
    assert [m.from_.key_code for m in manips[1:]] == list(commands)


def test_compile_sublayer_excludes_siblings_not_yet_compiled() -> None:
    variables = SublayerVariables(["a", "b", "c", "d"])

    manips = KarabinerBackend().compile_sublayer("b", {}, variables)

    toggle = manips[0]
    assert [(c.name, c.value) for c in toggle.conditions] == [
        ("hyper_sublayer_a", 0),
        ("hyper_sublayer_c", 0),
        ("hyper_sublayer_d", 0),
    ]


def test_toggle_conditions_cover_all_other_sublayers() -> None:
    root = _root()
    variables = SublayerVariables.from_root(root)

    out = KarabinerBackend().compile(root)

    toggles = [r.manipulators[0] for r, spec in zip(out, root.layers.values()) if isinstance(spec, Sublayer)]
    assert len(toggles) == len(variables)
    for layer_key, toggle in zip(["o", "w", "s"], toggles):
        names = [c.name for c in toggle.conditions]
        assert len(names) == len(variables) - 1
        assert variable_name(layer_key) not in names
        assert all(c.value == 0 for c in toggle.conditions)


def test_dispatch_rules_have_single_own_condition() -> None:
    root = _root()

    out = KarabinerBackend().compile(root)

    for rule, (layer_key, spec) in zip(out, root.layers.items()):
        if not isinstance(spec, Sublayer):
            assert len(rule.manipulators) == 1
            assert rule.manipulators[0].conditions == []
            continue
        for dispatch in rule.manipulators[1:]:
            assert len(dispatch.conditions) == 1
            assert dispatch.conditions[0].name == variable_name(layer_key)
            assert dispatch.conditions[0].value == 1


def test_command_key_matching_trigger_is_allowed() -> None:
    root = RootSpec(layers={"o": Sublayer(commands={"o": app("Obsidian")})})

    out = KarabinerBackend().compile(root)

    assert [m.from_.key_code for m in out[0].manipulators] == ["o", "o"]


def test_root_spec_accepts_tagged_dicts() -> None:
    root = RootSpec.model_validate(
        {
            "layers": {
                "o": {"kind": "sublayer", "commands": {"g": {"actions": [{"kind": "shell", "command": "open -a 'Google Chrome.app'"}]}}},
                "f6": {"kind": "leaf", "command": {"actions": [{"kind": "key", "key_code": "f6"}]}},
            }
        }
    )

    assert isinstance(root.layers["o"], Sublayer)
    assert isinstance(root.layers["f6"], Leaf)
    assert root.layers["f6"].command.actions == (KeyPress(key_code="f6"),)
