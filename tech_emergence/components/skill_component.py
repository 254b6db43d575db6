from dataclasses import dataclass, field
from typing import Dict
from tech_emergence.core.ecs import Component

@dataclass(slots=True)
class SkillComponent(Component):
    # Dictionary of skill id to level (0 to 100)
    # e.g., {"foraging": 12.0, "smithing": 74.0}
    skills: Dict[str, float] = field(default_factory=dict)
