from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Tuple
from polynomial import Polynomial


class VariableDictionary:
    """Ordered, read-only registry of variable names.

    One instance is shared by every polynomial of a system; indices into it
    stay valid for the lifetime of the system.
    """

    __slots__ = ("_names", "_index")

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: Tuple[str, ...] = tuple(names)
        self._index: Dict[str, int] = {}
        for i, name in enumerate(self._names):
            if name in self._index:
                raise ValueError(f"duplicate variable name '{name}'")
            self._index[name] = i

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    def index(self, name: str) -> int:
        if name not in self._index:
            raise KeyError(f"Variable '{name}' not in dictionary")
        return self._index[name]

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __getitem__(self, i: int) -> str:
        return self._names[i]

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VariableDictionary):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"VariableDictionary({list(self._names)!r})"


@dataclass
class System:
    """Polynomials sharing one variable dictionary."""
    var_dict: VariableDictionary
    members: List[Polynomial] = field(default_factory=list)

    def format(self, poly: Polynomial) -> str:
        return poly.to_string(self.var_dict)

    def formatted(self) -> List[str]:
        return [self.format(p) for p in self.members]

    def __getitem__(self, i: int) -> Polynomial:
        return self.members[i]

    def __iter__(self) -> Iterator[Polynomial]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __str__(self) -> str:
        return "\n".join(self.formatted())
