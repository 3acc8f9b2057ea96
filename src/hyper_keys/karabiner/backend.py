from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Sequence

from hyper_keys.layer.ir import (
    HYPER,
    Action,
    Command,
    ConsumerKey,
    KeyCode,
    KeyPress,
    Leaf,
    RootSpec,
    SetVariable,
    Shell,
    Sublayer,
    VendorKey,
)
from hyper_keys.layer.ir import Modifier as IRModifier
from hyper_keys.layer.variables import SublayerVariables, variable_name

from .layout import KeyTranslation
from .models.condition import ConditionType, VarCondition
from .models.from_event import FromEvent
from .models.manipulator import Manipulator
from .models.modifier import Modifier
from .models.modifiers import FromModifiers
from .models.rule import Rule
from .models.to_event import ToEvent, Variable

logger = logging.getLogger(__name__)


class KarabinerBackend:
    """Compile hyper key sublayers into Karabiner rules."""

    def __init__(
        self,
        *,
        translation: KeyTranslation | None = None,
        hyper: Sequence[IRModifier] = HYPER,
    ) -> None:
        self._translation = translation or KeyTranslation()
        self._hyper = [Modifier(mod.value) for mod in hyper]

    def compile(self, root: RootSpec) -> List[Rule]:
        """One Rule per root entry, in declaration order."""

        # Needed up front: each toggle rule excludes every other sublayer.
        variables = SublayerVariables.from_root(root)
        logger.debug("sublayer variables: %s", variables.names)

        rules: List[Rule] = []
        for key, spec in root.layers.items():
            if isinstance(spec, Leaf):
                rule = Rule(
                    description=f"Hyper Key + {self._translation.translate(key)}",
                    manipulators=[self._lower_leaf(key, spec.command)],
                )
            else:
                rule = Rule(
                    description=f'Hyper Key sublayer "{key}"',
                    manipulators=self.compile_sublayer(key, spec.commands, variables),
                )
            logger.debug("compiled %r with %d manipulators", rule.description, len(rule.manipulators))
            rules.append(rule)
        return rules

    def compile_sublayer(
        self,
        key: KeyCode,
        commands: Mapping[KeyCode, Command],
        variables: SublayerVariables,
    ) -> List[Manipulator]:
        """Toggle manipulator for `key`, then one dispatch manipulator per command."""

        var_name = variable_name(key)
        toggle = Manipulator(
            description=f"Toggle Hyper sublayer {key}",
            from_=self._hyper_from_event(key),
            # Variables default to 0 in Karabiner, so "== 0" also holds on startup.
            conditions=[_var_if(name, 0) for name in variables.others(key)],
            to=[_set_var(var_name, 1)],
            to_after_key_up=[_set_var(var_name, 0)],
        )

        manipulators = [toggle]
        for command_key, command in commands.items():
            manipulators.append(
                Manipulator(
                    description=command.description,
                    # Mandatory modifiers are not copied to `to`, so the held hyper chord
                    # does not leak into the emitted events.
                    from_=FromEvent(
                        key_code=self._translation.translate(command_key),
                        modifiers=FromModifiers(mandatory=[Modifier.ANY]),
                    ),
                    conditions=[_var_if(var_name, 1)],
                    to=self._lower_actions(command.actions),
                )
            )
        return manipulators

    def _lower_leaf(self, key: KeyCode, command: Command) -> Manipulator:
        return Manipulator(
            description=command.description,
            from_=self._hyper_from_event(key),
            to=self._lower_actions(command.actions),
        )

    def _hyper_from_event(self, key: KeyCode) -> FromEvent:
        return FromEvent(
            key_code=self._translation.translate(key),
            modifiers=FromModifiers(mandatory=list(self._hyper)),
        )

    def _lower_actions(self, actions: Iterable[Action]) -> List[ToEvent]:
        return [self._lower_action(action) for action in actions]

    def _lower_action(self, action: Action) -> ToEvent:
        if isinstance(action, KeyPress):
            key_code = action.key_code
            if action.translate:
                key_code = self._translation.translate(key_code)
            return ToEvent(
                key_code=key_code,
                modifiers=[Modifier(mod.value) for mod in action.modifiers] or None,
            )
        if isinstance(action, ConsumerKey):
            return ToEvent(consumer_key_code=action.code)
        if isinstance(action, VendorKey):
            return ToEvent(apple_vendor_keyboard_key_code=action.code)
        if isinstance(action, Shell):
            return ToEvent(shell_command=action.command)
        if isinstance(action, SetVariable):
            return _set_var(action.name, action.value)
        raise TypeError(f"unsupported action: {type(action).__name__}")


def _set_var(name: str, value: str | int | bool) -> ToEvent:
    return ToEvent(set_variable=Variable(name=name, value=value))


def _var_if(name: str, value: int) -> VarCondition:
    return VarCondition(type=ConditionType.VARIABLE_IF, name=name, value=value)
