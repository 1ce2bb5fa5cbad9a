"""User-driven disclosure state: which threats, consequences and barriers are expanded."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, NamedTuple, Set, Union

logger = logging.getLogger(__name__)


class ToggleKind(str, Enum):
    THREAT = "threat"
    CONSEQUENCE = "consequence"
    BARRIER = "barrier"


class ExpansionSnapshot(NamedTuple):
    threats: FrozenSet[str]
    consequences: FrozenSet[str]
    barriers: FrozenSet[str]


@dataclass
class ExpansionState:
    """Three independent sets of derived node ids (``threat-t1``, ``cons-c1``, ``bar-b1``).

    Ids are never checked against the model; an id with no matching node is
    stored and simply never matches during layout.
    """

    expanded_threats: Set[str] = field(default_factory=set)
    expanded_consequences: Set[str] = field(default_factory=set)
    # Tracked for a future barrier sub-chain; the layout does not read it yet.
    expanded_barriers: Set[str] = field(default_factory=set)

    def _bucket(self, kind: Union[ToggleKind, str]) -> Set[str]:
        kind = ToggleKind(kind)
        if kind is ToggleKind.THREAT:
            return self.expanded_threats
        if kind is ToggleKind.CONSEQUENCE:
            return self.expanded_consequences
        return self.expanded_barriers

    def toggle(self, kind: Union[ToggleKind, str], derived_id: str) -> bool:
        """Flip membership of ``derived_id``. Returns True if it is now expanded."""
        bucket = self._bucket(kind)
        if derived_id in bucket:
            bucket.remove(derived_id)
            expanded = False
        else:
            bucket.add(derived_id)
            expanded = True
        logger.debug("toggle %s %s -> %s", ToggleKind(kind).value, derived_id, "open" if expanded else "closed")
        return expanded

    def is_expanded(self, kind: Union[ToggleKind, str], derived_id: str) -> bool:
        return derived_id in self._bucket(kind)

    def snapshot(self) -> ExpansionSnapshot:
        return ExpansionSnapshot(
            frozenset(self.expanded_threats),
            frozenset(self.expanded_consequences),
            frozenset(self.expanded_barriers),
        )

    def clear(self) -> None:
        self.expanded_threats.clear()
        self.expanded_consequences.clear()
        self.expanded_barriers.clear()
