from __future__ import annotations

from typing import Iterable, Iterator, List

from .ir import KeyCode, RootSpec, Sublayer

VARIABLE_PREFIX = "hyper_sublayer_"


def variable_name(key: KeyCode) -> str:
    """Name of the host variable that marks sublayer `key` as active."""

    return f"{VARIABLE_PREFIX}{key}"


class SublayerVariables:
    """Registry of every sublayer variable in one configuration.

    Built once per compilation and handed to each sublayer so its toggle
    rule can exclude all sibling sublayers, including ones not compiled yet.
    """

    def __init__(self, keys: Iterable[KeyCode] = ()) -> None:
        self._names: List[str] = []
        for key in keys:
            name = variable_name(key)
            if name not in self._names:
                self._names.append(name)

    @classmethod
    def from_root(cls, root: RootSpec) -> SublayerVariables:
        # Leaf entries never toggle a mode, so they get no variable.
        return cls(key for key, spec in root.layers.items() if isinstance(spec, Sublayer))

    @property
    def names(self) -> List[str]:
        return list(self._names)

    def others(self, key: KeyCode) -> List[str]:
        own = variable_name(key)
        return [name for name in self._names if name != own]

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)
