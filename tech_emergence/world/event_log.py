from dataclasses import dataclass
from typing import List, Optional

@dataclass
class HistoricalEvent:
    tick: int
    kind: str  # e.g. "technology_discovered", "era_transition"
    territory_id: int
    title: str
    description: str = ""
    severity: str = "info"  # info | positive | negative | critical
    target_territory_id: Optional[int] = None

class EventLog:
    """Append-only notification sink."""

    def __init__(self):
        self.events: List[HistoricalEvent] = []

    def record(self, event: HistoricalEvent) -> HistoricalEvent:
        self.events.append(event)
        return event

    def of_kind(self, kind: str) -> List[HistoricalEvent]:
        return [e for e in self.events if e.kind == kind]

    def for_territory(self, territory_id: int) -> List[HistoricalEvent]:
        return [e for e in self.events if e.territory_id == territory_id]

    def __len__(self) -> int:
        return len(self.events)
