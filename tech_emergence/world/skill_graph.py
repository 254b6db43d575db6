from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple
import networkx as nx

# Skill eras, oldest first
SKILL_ERAS = [
    "primitive", "ancient", "classical", "medieval",
    "renaissance", "industrial", "modern", "atomic",
]

SKILL_CATEGORIES = [
    "gathering", "crafting", "construction", "agriculture",
    "combat", "knowledge", "social", "industrial",
]

# Lower bounds of SKILLED, EXPERT, LEGENDARY
TIER_BOUNDARIES = (30, 70, 90)

class SkillTier(Enum):
    NOVICE = 0
    SKILLED = 1
    EXPERT = 2
    LEGENDARY = 3

def get_skill_tier(level: float) -> SkillTier:
    """Classify a skill level. Total over all numbers: <30 novice, >=90 legendary."""
    if level >= TIER_BOUNDARIES[2]:
        return SkillTier.LEGENDARY
    if level >= TIER_BOUNDARIES[1]:
        return SkillTier.EXPERT
    if level >= TIER_BOUNDARIES[0]:
        return SkillTier.SKILLED
    return SkillTier.NOVICE

class SkillGraphError(Exception):
    """Raised when the skill table is not a valid prerequisite DAG."""

@dataclass(frozen=True)
class SkillPrerequisite:
    skill_id: str
    min_level: float

@dataclass(frozen=True)
class SkillDefinition:
    skill_id: str
    name: str
    category: str
    era: str
    description: str = ""
    prerequisites: Tuple[SkillPrerequisite, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict) -> "SkillDefinition":
        prereqs = tuple(
            SkillPrerequisite(skill_id, float(min_level))
            for skill_id, min_level in data.get("prerequisites", [])
        )
        return cls(
            skill_id=data["id"],
            name=data["name"],
            category=data["category"],
            era=data["era"],
            description=data.get("description", ""),
            prerequisites=prereqs,
        )

@dataclass
class LearnCheck:
    can_learn: bool
    missing_prereqs: List[str] = field(default_factory=list)

class SkillGraph:
    """
    Read-only skill table with prerequisite edges (prerequisite -> skill).
    Validated once on construction: every prerequisite must be a defined skill
    and the graph must be acyclic.
    """

    def __init__(self, definitions: Iterable[SkillDefinition]):
        self._definitions: Dict[str, SkillDefinition] = {}
        for definition in definitions:
            if definition.skill_id in self._definitions:
                raise SkillGraphError(f"Duplicate skill id: {definition.skill_id}")
            self._definitions[definition.skill_id] = definition

        self.graph = nx.DiGraph()
        self.graph.add_nodes_from(self._definitions)
        for definition in self._definitions.values():
            for prereq in definition.prerequisites:
                if prereq.skill_id not in self._definitions:
                    raise SkillGraphError(
                        f"Skill '{definition.skill_id}' requires undefined skill '{prereq.skill_id}'"
                    )
                self.graph.add_edge(prereq.skill_id, definition.skill_id, min_level=prereq.min_level)

        if not nx.is_directed_acyclic_graph(self.graph):
            cycle = nx.find_cycle(self.graph)
            path = " -> ".join([edge[0] for edge in cycle] + [cycle[0][0]])
            raise SkillGraphError(f"Skill prerequisites form a cycle: {path}")

    def __contains__(self, skill_id: str) -> bool:
        return skill_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def get(self, skill_id: str) -> Optional[SkillDefinition]:
        return self._definitions.get(skill_id)

    @property
    def skill_ids(self) -> List[str]:
        return list(self._definitions)

    def can_learn_skill(self, skill_id: str, current_skills: Dict[str, float]) -> LearnCheck:
        definition = self._definitions.get(skill_id)
        if definition is None:
            return LearnCheck(False, ["Unknown skill"])

        if not definition.prerequisites:
            return LearnCheck(True, [])

        missing = []
        for prereq in definition.prerequisites:
            current_level = current_skills.get(prereq.skill_id, 0)
            if current_level < prereq.min_level:
                prereq_name = self._definitions[prereq.skill_id].name
                missing.append(f"{prereq_name} {prereq.min_level:g}+")

        return LearnCheck(len(missing) == 0, missing)

    def skills_by_era(self, era: str) -> List[SkillDefinition]:
        """All skills of the given era and every earlier one."""
        if era not in SKILL_ERAS:
            return []
        allowed = set(SKILL_ERAS[:SKILL_ERAS.index(era) + 1])
        return [d for d in self._definitions.values() if d.era in allowed]

    def skills_by_category(self, category: str) -> List[SkillDefinition]:
        return [d for d in self._definitions.values() if d.category == category]

    def learning_path(self, skill_id: str) -> List[str]:
        """Transitive prerequisites of a skill, each listed after its own prerequisites."""
        if skill_id not in self._definitions:
            return []
        ancestors = nx.ancestors(self.graph, skill_id)
        order = nx.topological_sort(self.graph.subgraph(ancestors))
        return list(order)

def default_skill_graph() -> SkillGraph:
    from tech_emergence.data.skill_definitions import SKILL_DEFINITIONS
    return SkillGraph(SkillDefinition.from_dict(d) for d in SKILL_DEFINITIONS)
