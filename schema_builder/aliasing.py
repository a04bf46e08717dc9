"""Display-name deduplication.

A repeated name gets the first free `name_<n>` suffix, probing n = 1, 2, ...
in order, so aliases depend only on the order in which names are emitted.
"""

from typing import Collection


def alias_for_name(name: str, existing_names: Collection[str]) -> str:
    """Return the first of name, name_1, name_2, ... not in existing_names."""
    alias = name
    depth = 0
    while alias in existing_names:
        depth += 1
        alias = f"{name}_{depth}"
    return alias


class NameAliaser:
    """Stateful aliaser for one schema build.

    Keeps the next suffix to probe per base name, so a name repeated many
    times is not rescanned from `_1` on every reuse. Produces the same
    aliases as alias_for_name applied to the emitted names so far.
    """

    def __init__(self) -> None:
        self._emitted: set[str] = set()
        self._next_suffix: dict[str, int] = {}

    def alias(self, name: str) -> str:
        """Assign and record a display name unique among emitted names."""
        if name not in self._emitted:
            alias = name
        else:
            depth = self._next_suffix.get(name, 1)
            alias = f"{name}_{depth}"
            while alias in self._emitted:
                depth += 1
                alias = f"{name}_{depth}"
            self._next_suffix[name] = depth + 1
        self._emitted.add(alias)
        return alias

    @property
    def emitted(self) -> frozenset:
        return frozenset(self._emitted)
