from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class Completion:
    """Result of completing a typed fragment against the command names."""
    fragment: str
    matches: list[str] = field(default_factory=list)

    @property
    def text(self) -> str | None:
        """Replacement for the input field, set only for a unique match."""
        if len(self.matches) == 1:
            return self.matches[0]
        return None

    @property
    def ambiguous(self) -> bool:
        return len(self.matches) > 1


def complete(fragment: str, names: Iterable[str]) -> Completion:
    """Prefix-match fragment (case insensitive) against names, keeping their order.

    An empty fragment matches nothing.
    """
    if not fragment:
        return Completion(fragment)
    lf = fragment.lower()
    return Completion(fragment, [n for n in names if n.startswith(lf)])
