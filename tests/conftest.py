"""Pytest configuration and shared fixtures."""

import json

import pytest

from tech_emergence.core.config_manager import ConfigManager
from tech_emergence.core.ecs import EntityManager
from tech_emergence.components.data_components import TerritoryComponent, CharacterComponent
from tech_emergence.components.skill_component import SkillComponent
from tech_emergence.components.tags import IsTerritory
from tech_emergence.world.skill_graph import default_skill_graph
from tech_emergence.world.tech_catalog import TechCatalog, TechDefinition, TechSkillRequirement
from tech_emergence.world.knowledge_store import KnowledgeStore
from tech_emergence.world.tech_store import TechStore
from tech_emergence.world.diplomacy_store import DiplomacyStore
from tech_emergence.world.event_log import EventLog
from tech_emergence.systems.population_skill_system import PopulationSkillSystem
from tech_emergence.systems.research_system import ResearchSystem
from tech_emergence.systems.tech_exchange_system import TechExchangeSystem
from tech_emergence.utils.logger import Logger, LogCategory


class ScriptedRandom:
    """Replays fixed draws; choice() takes the index to pick from a queue."""

    def __init__(self, randoms=(), choices=()):
        self.randoms = list(randoms)
        self.choices = list(choices)
        self.random_calls = 0
        self.choice_calls = 0

    def random(self):
        self.random_calls += 1
        return self.randoms.pop(0)

    def choice(self, seq):
        self.choice_calls += 1
        index = self.choices.pop(0) if self.choices else 0
        return seq[index]


class World:
    """Wires the stores and systems around one entity manager."""

    def __init__(self, config, rng, catalog=None):
        self.config = config
        self.rng = rng
        self.em = EntityManager()
        self.skill_graph = default_skill_graph()
        self.catalog = catalog if catalog is not None else TechCatalog([])
        self.knowledge = KnowledgeStore()
        self.techs = TechStore()
        self.diplomacy = DiplomacyStore()
        self.events = EventLog()
        self.population = PopulationSkillSystem(self.em, self.skill_graph, self.knowledge, config)
        self.research = ResearchSystem(self.em, self.catalog, self.techs, self.knowledge,
                                       self.events, config, rng)
        self.exchange = TechExchangeSystem(self.em, self.research, self.diplomacy,
                                           self.events, config, rng)

    def add_territory(self, name="Testland", population=100, **stats) -> int:
        territory = self.em.create_entity()
        self.em.add_component(territory, TerritoryComponent(name=name, population=population, **stats))
        self.em.add_component(territory, IsTerritory())
        return territory

    def add_character(self, territory_id, skills, alive=True, name="Villager") -> int:
        character = self.em.create_entity()
        self.em.add_component(character, CharacterComponent(name=name, territory_id=territory_id, is_alive=alive))
        self.em.add_component(character, SkillComponent(skills=dict(skills)))
        return character

    def territory(self, territory_id) -> TerritoryComponent:
        return self.em.get_component(territory_id, TerritoryComponent)

    def mark_researched(self, territory_id, *tech_ids):
        for tech_id in tech_ids:
            row = self.techs.get(territory_id, tech_id) or self.techs.create(territory_id, tech_id)
            row.researched = True


def make_tech(tech_id, cost=100, era="stone_age", prerequisites=(), required_skills=(), **kwargs):
    return TechDefinition(
        tech_id=tech_id,
        name=kwargs.pop("name", tech_id.replace("_", " ").title()),
        era=era,
        knowledge_cost=cost,
        prerequisites=tuple(prerequisites),
        required_skills=tuple(required_skills),
        **kwargs,
    )


def requirement(skill, expert=None, skilled=None, avg=None):
    return TechSkillRequirement(skill, min_expert_percent=expert, min_skilled_percent=skilled, min_average_level=avg)


@pytest.fixture(autouse=True)
def quiet_logger():
    Logger.set_debug(False)
    yield
    Logger.set_debug(True)
    Logger.set_time_manager(None)
    for category in LogCategory:
        Logger.mute(category, False)


@pytest.fixture
def config(tmp_path):
    """Empty config: every lookup falls back to its in-code default."""
    path = tmp_path / "balance.json"
    path.write_text(json.dumps({}), encoding="utf-8")
    manager = ConfigManager(str(path), watch=False)
    yield manager
    manager.stop()


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def world(config, rng):
    return World(config, rng)


@pytest.fixture
def make_world(config):
    def _make(catalog=None, rng=None):
        return World(config, rng if rng is not None else ScriptedRandom(), catalog)
    return _make
