import argparse
from tech_emergence.core.ecs import EntityManager
from tech_emergence.core.time_manager import TimeManager
from tech_emergence.core.config_manager import ConfigManager
from tech_emergence.core.random_source import RandomSource, make_random_source
from tech_emergence.components.data_components import TerritoryComponent, CharacterComponent
from tech_emergence.components.skill_component import SkillComponent
from tech_emergence.components.tags import IsTerritory
from tech_emergence.world.skill_graph import SkillGraph, SKILL_ERAS, default_skill_graph
from tech_emergence.world.tech_catalog import default_tech_catalog, get_current_era, era_index
from tech_emergence.world.knowledge_store import KnowledgeStore
from tech_emergence.world.tech_store import TechStore
from tech_emergence.world.diplomacy_store import DiplomacyStore, RelationshipStatus
from tech_emergence.world.event_log import EventLog
from tech_emergence.systems.population_skill_system import PopulationSkillSystem
from tech_emergence.systems.research_system import ResearchSystem
from tech_emergence.systems.tech_exchange_system import TechExchangeSystem
from tech_emergence.utils.logger import Logger, LogCategory

TERRITORY_NAMES = ["Aldermoor", "Brackenford", "Caerwyn", "Dunhallow", "Eastmere", "Fenwick"]

# Skills every newborn starts dabbling in
STARTING_SKILLS = ["foraging", "hunting", "fishing", "woodcutting", "quarrying", "pottery", "weaving", "farming"]

def spawn_character(entity_manager: EntityManager, territory_id: int, name: str, rng: RandomSource) -> int:
    character = entity_manager.create_entity()
    skills = {}
    for skill_id in STARTING_SKILLS:
        if rng.random() < 0.5:
            skills[skill_id] = round(rng.random() * 40, 1)
    entity_manager.add_component(character, CharacterComponent(name=name, territory_id=territory_id))
    entity_manager.add_component(character, SkillComponent(skills=skills))
    return character

def practice_skills(entity_manager: EntityManager, skill_graph: SkillGraph,
                    population_system: PopulationSkillSystem, rng: RandomSource, practice_chance: float):
    """Stand-in for the profession layer: characters practice a skill they are able to learn."""
    for _, character, skill_comp in entity_manager.get_entities_with(CharacterComponent, SkillComponent):
        if not character.is_alive or rng.random() >= practice_chance:
            continue

        territory = entity_manager.get_component(character.territory_id, TerritoryComponent)
        # Skills open up one era ahead of the territory's technology
        skill_era = SKILL_ERAS[min(len(SKILL_ERAS) - 1, era_index(get_current_era(territory.technology)) + 1)]
        candidates = [
            d.skill_id for d in skill_graph.skills_by_era(skill_era)
            if skill_graph.can_learn_skill(d.skill_id, skill_comp.skills).can_learn
        ]
        if not candidates:
            continue

        skill_id = rng.choice(candidates)
        current = skill_comp.skills.get(skill_id, 0.0)
        # Diminishing returns near mastery
        improvement = min(100.0 - current, 1.0 + rng.random() * 4.0 * (1 - current / 100))
        if improvement <= 0:
            continue
        skill_comp.skills[skill_id] = current + improvement
        population_system.record_skill_practice(character.territory_id, skill_id, improvement)

def process_deaths(entity_manager: EntityManager, population_system: PopulationSkillSystem,
                   rng: RandomSource, death_chance: float, tick: int):
    """Stand-in for the lifecycle layer: random deaths, each replaced by a newborn."""
    deceased = []
    for entity, character, _ in entity_manager.get_entities_with(CharacterComponent, SkillComponent):
        if character.is_alive and rng.random() < death_chance:
            deceased.append((entity, character))

    for entity, character in deceased:
        character.is_alive = False
        population_system.apply_knowledge_decay(character.territory_id, entity)
        Logger.debug(f"{character.name} died", tick)
        spawn_character(entity_manager, character.territory_id, f"{character.name} II", rng)
        entity_manager.destroy_entity(entity)

def main():
    # 0. Parse Arguments
    parser = argparse.ArgumentParser(description="Organic technology emergence simulation")
    parser.add_argument("--config", default="config/balance.json", help="Path to the balance config")
    parser.add_argument("--ticks", type=int, default=None, help="Number of monthly ticks to simulate")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--quiet", action="store_true", help="Only log yearly summaries")
    args = parser.parse_args()

    # 1. Initialization
    config_manager = ConfigManager(args.config)
    sim_conf = config_manager.get("simulation", {})
    ticks = args.ticks if args.ticks is not None else sim_conf.get("ticks", 240)
    seed = args.seed if args.seed is not None else sim_conf.get("seed", None)
    n_territories = sim_conf.get("territories", 3)
    characters_per_territory = sim_conf.get("characters_per_territory", 40)
    population_per_character = sim_conf.get("population_per_character", 1)
    death_chance = sim_conf.get("death_chance", 0.005)
    practice_chance = sim_conf.get("practice_chance", 0.8)
    log_interval = sim_conf.get("log_interval", 12)

    Logger.set_debug(not args.quiet)
    if args.quiet:
        Logger.mute(LogCategory.RESEARCH)
        Logger.mute(LogCategory.DIPLOMACY)
    time_manager = TimeManager()
    Logger.set_time_manager(time_manager)
    rng = make_random_source(seed)
    entity_manager = EntityManager()

    # 2. Shared state
    skill_graph = default_skill_graph()
    tech_catalog = default_tech_catalog()
    knowledge_store = KnowledgeStore()
    tech_store = TechStore()
    diplomacy_store = DiplomacyStore()
    event_log = EventLog()
    Logger.info(f"Loaded {len(skill_graph)} skills and {len(tech_catalog)} technologies")

    # Systems
    population_system = PopulationSkillSystem(entity_manager, skill_graph, knowledge_store, config_manager)
    research_system = ResearchSystem(entity_manager, tech_catalog, tech_store, knowledge_store,
                                     event_log, config_manager, rng)
    exchange_system = TechExchangeSystem(entity_manager, research_system, diplomacy_store,
                                         event_log, config_manager, rng)

    # ===== SPAWN ENTITIES =====
    territories = []
    for i in range(n_territories):
        name = TERRITORY_NAMES[i % len(TERRITORY_NAMES)]
        territory = entity_manager.create_entity()
        entity_manager.add_component(territory, TerritoryComponent(
            name=name,
            population=characters_per_territory * population_per_character,
            wealth=30.0,
            food=20.0,
        ))
        entity_manager.add_component(territory, IsTerritory())
        territories.append(territory)

        for c in range(characters_per_territory):
            spawn_character(entity_manager, territory, f"{name} Villager {c + 1}", rng)
        Logger.info(f"Created territory {name} with {characters_per_territory} characters")

    for i, a in enumerate(territories):
        for b in territories[i + 1:]:
            status = RelationshipStatus.FRIENDLY if (a + b) % 2 else RelationshipStatus.NEUTRAL
            diplomacy_store.set_relationship(a, b, trust=20.0, status=status)

    Logger.info("Simulation Started")

    # ===== MAIN LOOP =====
    try:
        for _ in range(ticks):
            tick = time_manager.advance()

            # 1. Characters practice and die
            practice_skills(entity_manager, skill_graph, population_system, rng, practice_chance)
            process_deaths(entity_manager, population_system, rng, death_chance, tick)

            # 2. Aggregate, then let technologies emerge
            population_system.update(tick)
            research_system.update(tick)

            # 3. Territory decisions, once a year
            if time_manager.month == 0:
                for territory_id in territories:
                    territory = entity_manager.get_component(territory_id, TerritoryComponent)
                    territory.wealth += 20.0
                    territory.food += 15.0
                    population_system.hold_knowledge_festival(territory_id, tick)
                    research_system.establish_academy(territory_id, tick)

                    others = [t for t in territories if t != territory_id]
                    if not others:
                        continue
                    other = rng.choice(others)
                    known = sorted(tech_store.researched_ids(other) - tech_store.researched_ids(territory_id))
                    if known:
                        exchange_system.share_technology(other, territory_id, known[0], tick)
                    if territory.influence >= 5:
                        exchange_system.steal_technology(territory_id, other, tick)

            # Logging
            if tick % log_interval == 0:
                Logger.info(f"=== {time_manager.get_date_string()} ===")
                for territory_id in territories:
                    territory = entity_manager.get_component(territory_id, TerritoryComponent)
                    summary = research_system.get_technology_summary(territory_id)
                    knowledge = population_system.get_knowledge_summary(territory_id)
                    strong = ", ".join(a.skill for a in knowledge.strong_areas) or "none"
                    Logger.knowledge(
                        f"{territory.name}: {summary.current_era} | Tech:{territory.technology:.0f} "
                        f"Knowledge:{territory.knowledge:.0f} | Researched:{summary.researched_count} "
                        f"In progress:{summary.in_progress_count} | Strong: {strong}"
                    )
    except KeyboardInterrupt:
        Logger.info("Interrupted")
    finally:
        config_manager.stop()

    for event in event_log.events:
        Logger.info(f"[Year {event.tick // 12}] {event.title}")
    Logger.info(f"Simulation completed after {time_manager.total_ticks} ticks")

if __name__ == "__main__":
    main()
