from dataclasses import dataclass
from typing import Optional
from tech_emergence.core.ecs import Component

@dataclass(slots=True)
class TerritoryComponent(Component):
    name: str
    population: int = 0
    # Scalar civilization stats, 0-100
    knowledge: float = 0.0
    technology: float = 0.0
    influence: float = 0.0
    happiness: float = 50.0
    # Stockpiles
    wealth: float = 0.0
    food: float = 0.0

@dataclass(slots=True)
class CharacterComponent(Component):
    name: str
    territory_id: int
    is_alive: bool = True
    profession: Optional[str] = None

@dataclass(slots=True)
class BuildingComponent(Component):
    territory_id: int
    building_type: str  # e.g., "academy"
    name: Optional[str] = None
    level: int = 1  # 1-5
    condition: float = 100.0  # 0-100, degrades over time
    workers: int = 0
    max_workers: int = 0
    output_per_tick: float = 0.0
    maintenance_cost: float = 0.0
    constructed_at_tick: int = 0
