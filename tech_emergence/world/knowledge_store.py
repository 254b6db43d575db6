from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

@dataclass
class PopulationSkillStat:
    """Aggregated view of one skill across a territory's living population."""
    territory_id: int
    skill_id: str
    # Tier counts, mutually exclusive
    novice_count: int = 0
    skilled_count: int = 0
    expert_count: int = 0
    legendary_count: int = 0
    # Percent of the whole territory population, not of practitioners
    skilled_percent: float = 0.0  # skilled + expert + legendary
    expert_percent: float = 0.0  # expert + legendary
    total_skill_points: float = 0.0
    average_level: float = 0.0
    average_expert_level: float = 0.0
    # Persistent, only grows through accrual and shrinks through decay
    collective_knowledge: float = 0.0
    knowledge_gain_this_tick: float = 0.0
    last_updated_tick: int = 0

    @property
    def practitioner_count(self) -> int:
        return self.novice_count + self.skilled_count + self.expert_count + self.legendary_count

class KnowledgeStore:
    """PopulationSkillStat rows keyed by (territory_id, skill_id). Rows are never deleted."""

    def __init__(self):
        self._rows: Dict[Tuple[int, str], PopulationSkillStat] = {}

    def get(self, territory_id: int, skill_id: str) -> Optional[PopulationSkillStat]:
        return self._rows.get((territory_id, skill_id))

    def get_or_create(self, territory_id: int, skill_id: str) -> PopulationSkillStat:
        key = (territory_id, skill_id)
        row = self._rows.get(key)
        if row is None:
            row = PopulationSkillStat(territory_id=territory_id, skill_id=skill_id)
            self._rows[key] = row
        return row

    def put(self, row: PopulationSkillStat) -> PopulationSkillStat:
        self._rows[(row.territory_id, row.skill_id)] = row
        return row

    def for_territory(self, territory_id: int) -> List[PopulationSkillStat]:
        return [row for (tid, _), row in self._rows.items() if tid == territory_id]

    def as_map(self, territory_id: int) -> Dict[str, PopulationSkillStat]:
        return {row.skill_id: row for row in self.for_territory(territory_id)}

    def __len__(self) -> int:
        return len(self._rows)
