from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple

# Era id -> (display name, technology stat lower bound)
TECHNOLOGY_ERAS = {
    "stone_age": ("Stone Age", 0),
    "bronze_age": ("Bronze Age", 25),
    "iron_age": ("Iron Age", 50),
    "medieval": ("Medieval Era", 75),
}
ERA_ORDER = ["stone_age", "bronze_age", "iron_age", "medieval"]

def get_current_era(technology: float) -> str:
    """Map a territory's technology stat (0-100) onto a tech era."""
    current = ERA_ORDER[0]
    for era in ERA_ORDER:
        if technology >= TECHNOLOGY_ERAS[era][1]:
            current = era
    return current

def get_era_name(era: str) -> str:
    return TECHNOLOGY_ERAS.get(era, (era, 0))[0]

def era_index(era: str) -> int:
    if era not in TECHNOLOGY_ERAS:
        raise ValueError(f"Unknown technology era: {era}")
    return ERA_ORDER.index(era)

class TechCatalogError(Exception):
    """Raised when a technology table repeats an id or names an unknown era."""

@dataclass(frozen=True)
class TechSkillRequirement:
    skill: str
    min_expert_percent: Optional[float] = None
    min_skilled_percent: Optional[float] = None
    min_average_level: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "TechSkillRequirement":
        return cls(
            skill=data["skill"],
            min_expert_percent=data.get("min_expert_percent"),
            min_skilled_percent=data.get("min_skilled_percent"),
            min_average_level=data.get("min_average_level"),
        )

@dataclass(frozen=True)
class TechUnlock:
    unlock_type: str  # building | unit | action | bonus
    unlock_id: str
    description: str = ""

@dataclass(frozen=True)
class TechDefinition:
    tech_id: str
    name: str
    era: str
    knowledge_cost: float
    description: str = ""
    category: str = "science"
    prerequisites: Tuple[str, ...] = ()
    required_skills: Tuple[TechSkillRequirement, ...] = ()
    unlocks: Tuple[TechUnlock, ...] = ()
    is_innate: bool = False

    @classmethod
    def from_dict(cls, data: Dict) -> "TechDefinition":
        return cls(
            tech_id=data["tech_id"],
            name=data["name"],
            era=data["era"],
            knowledge_cost=float(data["knowledge_cost"]),
            description=data.get("description", ""),
            category=data.get("category", "science"),
            prerequisites=tuple(data.get("prerequisites", [])),
            required_skills=tuple(TechSkillRequirement.from_dict(r) for r in data.get("required_skills", [])),
            unlocks=tuple(
                TechUnlock(u["type"], u["id"], u.get("description", ""))
                for u in data.get("unlocks", [])
            ),
            is_innate=data.get("is_innate", False),
        )

class TechCatalog:
    """Technology definitions in declaration order."""

    def __init__(self, definitions: Iterable[TechDefinition]):
        self._techs: Dict[str, TechDefinition] = {}
        for tech in definitions:
            if tech.tech_id in self._techs:
                raise TechCatalogError(f"Duplicate technology id: {tech.tech_id}")
            if tech.era not in TECHNOLOGY_ERAS:
                raise TechCatalogError(f"Technology '{tech.tech_id}' has unknown era '{tech.era}'")
            self._techs[tech.tech_id] = tech

    def __contains__(self, tech_id: str) -> bool:
        return tech_id in self._techs

    def __iter__(self):
        return iter(self._techs.values())

    def __len__(self) -> int:
        return len(self._techs)

    def get(self, tech_id: str) -> Optional[TechDefinition]:
        return self._techs.get(tech_id)

    def starting_technologies(self) -> List[TechDefinition]:
        return [t for t in self._techs.values() if not t.prerequisites]

    def technologies_for_era(self, era: str) -> List[TechDefinition]:
        return [t for t in self._techs.values() if t.era == era]

    def available_technologies(self, researched: Set[str]) -> List[TechDefinition]:
        """Unresearched techs whose prerequisites are all researched."""
        return [
            t for t in self._techs.values()
            if t.tech_id not in researched and all(p in researched for p in t.prerequisites)
        ]

def default_tech_catalog() -> TechCatalog:
    from tech_emergence.data.tech_tree import TECH_TREE
    return TechCatalog(TechDefinition.from_dict(d) for d in TECH_TREE)
