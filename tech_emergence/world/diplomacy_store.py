from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional

class RelationshipStatus(Enum):
    NEUTRAL = "neutral"
    FRIENDLY = "friendly"
    ALLIED = "allied"
    TENSE = "tense"
    HOSTILE = "hostile"
    AT_WAR = "at_war"

# Statuses under which nothing is shared
BLOCKING_STATUSES = (RelationshipStatus.HOSTILE, RelationshipStatus.AT_WAR)

@dataclass
class Relationship:
    territory_a: int
    territory_b: int
    trust: float = 0.0  # -100 to 100
    status: RelationshipStatus = RelationshipStatus.NEUTRAL

    def adjust_trust(self, delta: float):
        self.trust = max(-100.0, min(100.0, self.trust + delta))

class DiplomacyStore:
    """Relationships keyed by the unordered pair of territory ids."""

    def __init__(self):
        self._relationships: Dict[FrozenSet[int], Relationship] = {}

    def get(self, territory_a: int, territory_b: int) -> Optional[Relationship]:
        return self._relationships.get(frozenset((territory_a, territory_b)))

    def set_relationship(self, territory_a: int, territory_b: int, trust: float = 0.0,
                         status: RelationshipStatus = RelationshipStatus.NEUTRAL) -> Relationship:
        relationship = Relationship(territory_a, territory_b, trust, status)
        self._relationships[frozenset((territory_a, territory_b))] = relationship
        return relationship
