from dataclasses import dataclass
from tech_emergence.core.ecs import Component

@dataclass(slots=True)
class IsTerritory(Component):
    pass

@dataclass(slots=True)
class IsAcademy(Component):
    pass
