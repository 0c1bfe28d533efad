"""
registry.py — Algorithm metadata & name resolution
===================================================
Shared by the three family registries.

Each family declares a closed `Enum` of algorithm names and a REGISTRY
mapping every member to an AlgoInfo card.  The generator bound in the
card has the family's common signature (input → Iterator[Step]), so
adding an algorithm is: write the generator, add an enum member, add
one registry entry.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Type, TypeVar, Union


class UnknownAlgorithmError(ValueError):
    """Raised when a family or algorithm name is not in the closed enumeration."""


@dataclass(frozen=True)
class AlgoInfo:
    key:               str                    # registry key, e.g. "bfs"
    family:            str                    # "pathfinding" | "sorting" | "graph"
    label:             str                    # human label, e.g. "Breadth-First Search"
    fn:                Callable               # the generator function
    tags:              List[str] = field(default_factory=list)
    complexity_time:   str      = ""          # e.g. "O(V + E)"
    complexity_space:  str      = ""          # e.g. "O(V)"
    description:       str      = ""          # one-liner for the UI card

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "family":           self.family,
            "label":            self.label,
            "tags":             list(self.tags),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


E = TypeVar("E", bound=Enum)


def resolve(enum_cls: Type[E], name: Union[str, E]) -> E:
    """
    Map a user-supplied name onto a member of `enum_cls`.

    Matching ignores case and surrounding whitespace and treats "_" and
    "-" alike, so "Floyd_Warshall" resolves to "floyd-warshall".
    """
    if isinstance(name, enum_cls):
        return name
    key = str(name).strip().lower().replace("_", "-")
    try:
        return enum_cls(key)
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise UnknownAlgorithmError(f"Unknown algorithm: {name!r} (expected one of: {choices})") from None


def check_exhaustive(enum_cls: Type[Enum], registry: Dict) -> None:
    """Every enum member must have exactly one registry entry."""
    missing = [m.value for m in enum_cls if m not in registry]
    if missing:
        raise RuntimeError(f"{enum_cls.__name__} members without a registry entry: {missing}")
