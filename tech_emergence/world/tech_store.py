from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

class ResearchState(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    RESEARCHED = "researched"

@dataclass
class TerritoryTechProgress:
    territory_id: int
    tech_id: str
    researched: bool = False
    research_progress: float = 0.0  # capped at the tech's knowledge_cost
    research_started_tick: Optional[int] = None
    researched_at_tick: Optional[int] = None

    @property
    def state(self) -> ResearchState:
        if self.researched:
            return ResearchState.RESEARCHED
        if self.research_progress > 0 or self.research_started_tick is not None:
            return ResearchState.IN_PROGRESS
        return ResearchState.NOT_STARTED

class TechStore:
    """TerritoryTechProgress rows keyed by (territory_id, tech_id)."""

    def __init__(self):
        self._rows: Dict[Tuple[int, str], TerritoryTechProgress] = {}

    def get(self, territory_id: int, tech_id: str) -> Optional[TerritoryTechProgress]:
        return self._rows.get((territory_id, tech_id))

    def create(self, territory_id: int, tech_id: str, progress: float = 0.0,
               started_tick: Optional[int] = None) -> TerritoryTechProgress:
        row = TerritoryTechProgress(
            territory_id=territory_id,
            tech_id=tech_id,
            research_progress=progress,
            research_started_tick=started_tick,
        )
        self._rows[(territory_id, tech_id)] = row
        return row

    def is_researched(self, territory_id: int, tech_id: str) -> bool:
        row = self._rows.get((territory_id, tech_id))
        return row is not None and row.researched

    def for_territory(self, territory_id: int) -> List[TerritoryTechProgress]:
        return [row for (tid, _), row in self._rows.items() if tid == territory_id]

    def researched_ids(self, territory_id: int) -> Set[str]:
        return {row.tech_id for row in self.for_territory(territory_id) if row.researched}
