from dataclasses import dataclass, field
from typing import List
from tech_emergence.core.ecs import System, EntityManager
from tech_emergence.core.config_manager import ConfigManager
from tech_emergence.core.random_source import RandomSource
from tech_emergence.core.results import ResearchResult, AcademyResult, ResearchError
from tech_emergence.components.data_components import TerritoryComponent, BuildingComponent
from tech_emergence.components.tags import IsTerritory, IsAcademy
from tech_emergence.world.tech_catalog import (
    TechCatalog, TechDefinition, get_current_era, get_era_name, era_index,
)
from tech_emergence.world.tech_store import TechStore, TerritoryTechProgress
from tech_emergence.world.knowledge_store import KnowledgeStore
from tech_emergence.world.event_log import EventLog, HistoricalEvent
from tech_emergence.systems.tech_requirements import check_tech_requirements, calculate_skill_bonus
from tech_emergence.utils.logger import Logger

@dataclass
class TechnologySummary:
    current_era: str = "Stone Age"
    technology_level: float = 0.0
    researched_count: int = 0
    in_progress_count: int = 0
    available_techs: List[str] = field(default_factory=list)

class ResearchSystem(System):
    """
    Research state machine per (territory, tech):
    not started -> in progress -> researched (terminal).

    Progress arrives from three sources that share one accumulation and
    completion path: directed research, the organic emergence pass in update(),
    and transfers from other territories (see TechExchangeSystem).
    """

    def __init__(self, entity_manager: EntityManager, tech_catalog: TechCatalog, tech_store: TechStore,
                 knowledge_store: KnowledgeStore, event_log: EventLog, config_manager: ConfigManager,
                 rng: RandomSource):
        self.entity_manager = entity_manager
        self.tech_catalog = tech_catalog
        self.tech_store = tech_store
        self.knowledge_store = knowledge_store
        self.event_log = event_log
        self.config_manager = config_manager
        self.rng = rng

    def update(self, tick: int):
        for territory_id, _, _ in self.entity_manager.get_entities_with(IsTerritory, TerritoryComponent):
            self.advance_organic_research(territory_id, tick)

    # ===== DIRECTED RESEARCH =====

    def research_technology(self, territory_id: int, tech_id: str, tick: int) -> ResearchResult:
        territory = self.entity_manager.get_component(territory_id, TerritoryComponent)
        if territory is None:
            return ResearchResult.failure(ResearchError.NOT_FOUND, "Territory not found")

        tech = self.tech_catalog.get(tech_id)
        if tech is None:
            return ResearchResult.failure(ResearchError.NOT_FOUND, "Technology not found")

        for prereq in tech.prerequisites:
            if not self.tech_store.is_researched(territory_id, prereq):
                return ResearchResult.failure(ResearchError.PREREQUISITE_UNMET, f"Prerequisite not met: {prereq}")

        if not self._era_reachable(territory, tech):
            return ResearchResult.failure(ResearchError.FUTURE_ERA, "Technology is from a future era")

        if self.tech_store.is_researched(territory_id, tech_id):
            return ResearchResult.failure(ResearchError.ALREADY_COMPLETED, "Technology already researched")

        progress_per_tick = self.calculate_progress_per_tick(territory_id, territory)
        row = self.accumulate_progress(territory_id, tech, progress_per_tick, tick)

        Logger.research(
            f"{territory.name} researching {tech.name}: {row.research_progress:.1f}/{tech.knowledge_cost:g}", tick
        )
        return ResearchResult(success=True, progress=row.research_progress, completed=row.researched)

    def calculate_progress_per_tick(self, territory_id: int, territory: TerritoryComponent) -> float:
        base = self.config_manager.get("research.base_progress", 5.0)
        knowledge_factor = self.config_manager.get("research.knowledge_factor", 10.0)
        technology_divisor = self.config_manager.get("research.technology_divisor", 200.0)

        academy_bonus = self.calculate_academy_bonus(territory_id)
        return (base + knowledge_factor * territory.knowledge / 100 + academy_bonus) * (1 + territory.technology / technology_divisor)

    def calculate_academy_bonus(self, territory_id: int) -> float:
        multiplier = self.config_manager.get("research.academy.level_multiplier", 2.0)
        bonus = 0.0
        for _, building, _ in self.entity_manager.get_entities_with(BuildingComponent, IsAcademy):
            if building.territory_id == territory_id and building.building_type == "academy":
                bonus += building.level * multiplier * (building.condition / 100)
        return bonus

    # ===== SHARED PROGRESS PATH =====

    def accumulate_progress(self, territory_id: int, tech: TechDefinition, amount: float,
                            tick: int) -> TerritoryTechProgress:
        """Add progress (capped at the tech's cost) and complete the tech once the cost is reached."""
        row = self.tech_store.get(territory_id, tech.tech_id)
        if row is None:
            row = self.tech_store.create(territory_id, tech.tech_id, started_tick=tick)
        if row.researched:
            return row

        if row.research_started_tick is None:
            row.research_started_tick = tick
        row.research_progress = min(tech.knowledge_cost, row.research_progress + amount)

        if row.research_progress >= tech.knowledge_cost:
            self.complete_research(territory_id, tech, tick)
        return row

    def complete_research(self, territory_id: int, tech: TechDefinition, tick: int):
        row = self.tech_store.get(territory_id, tech.tech_id)
        if row is None:
            row = self.tech_store.create(territory_id, tech.tech_id, started_tick=tick)
        if row.researched:
            return

        row.researched = True
        row.research_progress = tech.knowledge_cost
        row.researched_at_tick = tick
        self.apply_technology_effects(territory_id, tech, tick)

    def apply_technology_effects(self, territory_id: int, tech: TechDefinition, tick: int):
        territory = self.entity_manager.get_component(territory_id, TerritoryComponent)
        if territory is None:
            return

        technology_gain = self.config_manager.get("research.effects.technology", 3)
        old_era = get_current_era(territory.technology)
        new_era = get_current_era(territory.technology + technology_gain)

        territory.technology = min(100.0, territory.technology + technology_gain)
        territory.knowledge = min(100.0, territory.knowledge + self.config_manager.get("research.effects.knowledge", 2))
        territory.influence = min(100.0, territory.influence + self.config_manager.get("research.effects.influence", 1))

        if old_era != new_era:
            era_name = get_era_name(new_era)
            territory.happiness = min(100.0, territory.happiness + self.config_manager.get("research.effects.era_happiness", 10))
            self.event_log.record(HistoricalEvent(
                tick=tick,
                kind="era_transition",
                territory_id=territory_id,
                title=f"{territory.name} Enters {era_name}",
                description=f"Through technological advancement, {territory.name} has entered a new era of civilization.",
                severity="positive",
            ))
            Logger.research(f"{territory.name} enters the {era_name}", tick)

        self.event_log.record(HistoricalEvent(
            tick=tick,
            kind="technology_discovered",
            territory_id=territory_id,
            title=f"{tech.name} Discovered",
            description=f"{territory.name} has discovered {tech.name}! {tech.description}",
            severity="positive",
        ))
        Logger.research(f"{territory.name} discovered {tech.name}", tick)

    # ===== ORGANIC EMERGENCE =====

    def advance_organic_research(self, territory_id: int, tick: int):
        """Advance every reachable tech whose population skill thresholds are met."""
        territory = self.entity_manager.get_component(territory_id, TerritoryComponent)
        if territory is None:
            return

        threshold = self.config_manager.get("research.breakthrough.threshold_percent", 80.0)
        chance_per_point = self.config_manager.get("research.breakthrough.chance_per_point", 0.03)

        # Snapshot: techs completed during this pass unlock their successors next tick
        researched = self.tech_store.researched_ids(territory_id)
        stats = self.knowledge_store.as_map(territory_id)

        for tech in self.tech_catalog:
            if tech.tech_id in researched:
                continue
            # No era gate here; skill thresholds alone hold back later techs
            if not all(p in researched for p in tech.prerequisites):
                continue

            row = self.tech_store.get(territory_id, tech.tech_id)
            if row is None:
                row = self.tech_store.create(territory_id, tech.tech_id)

            # Innate: no effects, no notification
            if tech.is_innate:
                row.researched = True
                row.research_progress = tech.knowledge_cost
                row.researched_at_tick = tick
                continue

            check = check_tech_requirements(self.knowledge_store, territory_id, tech.required_skills)
            if not check.met:
                continue

            bonus = calculate_skill_bonus(tech.required_skills, stats)
            row = self.accumulate_progress(territory_id, tech, bonus, tick)
            if row.researched:
                self._record_breakthrough(territory_id, territory, tech, tick)
                continue

            percent = row.research_progress / tech.knowledge_cost * 100 if tech.knowledge_cost > 0 else 100.0
            if percent >= threshold:
                chance = (percent - threshold) * chance_per_point
                if self.rng.random() < chance:
                    self.complete_research(territory_id, tech, tick)
                    self._record_breakthrough(territory_id, territory, tech, tick)

    def _record_breakthrough(self, territory_id: int, territory: TerritoryComponent, tech: TechDefinition, tick: int):
        self.event_log.record(HistoricalEvent(
            tick=tick,
            kind="breakthrough",
            territory_id=territory_id,
            title=f"Discovery: {tech.name}!",
            description=(
                f"Through years of practice and accumulated knowledge, "
                f"the people of {territory.name} have discovered {tech.name}!"
            ),
            severity="positive",
        ))

    # ===== ACADEMY & SUMMARY =====

    def establish_academy(self, territory_id: int, tick: int) -> AcademyResult:
        territory = self.entity_manager.get_component(territory_id, TerritoryComponent)
        if territory is None:
            return AcademyResult.failure(ResearchError.NOT_FOUND, "Territory not found")

        required_tech = self.config_manager.get("research.academy.required_tech", "writing")
        if not self.tech_store.is_researched(territory_id, required_tech):
            return AcademyResult.failure(
                ResearchError.PREREQUISITE_UNMET,
                f"{required_tech} technology required to establish academy",
            )

        cost = self.config_manager.get("research.academy.cost", 50)
        if territory.wealth < cost:
            return AcademyResult.failure(ResearchError.INSUFFICIENT_RESOURCE, "Not enough wealth")

        territory.wealth -= cost
        academy = self.entity_manager.create_entity()
        self.entity_manager.add_component(academy, BuildingComponent(
            territory_id=territory_id,
            building_type="academy",
            name="Academy of Learning",
            level=1,
            condition=100.0,
            workers=0,
            max_workers=3,
            output_per_tick=2.0,
            maintenance_cost=4.0,
            constructed_at_tick=tick,
        ))
        self.entity_manager.add_component(academy, IsAcademy())

        Logger.research(f"{territory.name} established an academy", tick)
        return AcademyResult(success=True, message="Academy established", building_id=academy)

    def get_technology_summary(self, territory_id: int) -> TechnologySummary:
        territory = self.entity_manager.get_component(territory_id, TerritoryComponent)
        if territory is None:
            return TechnologySummary()

        rows = self.tech_store.for_territory(territory_id)
        researched = {row.tech_id for row in rows if row.researched}
        in_progress = [row for row in rows if not row.researched and row.research_progress > 0]
        available = [t.tech_id for t in self.tech_catalog.available_technologies(researched)]

        return TechnologySummary(
            current_era=get_era_name(get_current_era(territory.technology)),
            technology_level=territory.technology,
            researched_count=len(researched),
            in_progress_count=len(in_progress),
            available_techs=available,
        )

    def _era_reachable(self, territory: TerritoryComponent, tech: TechDefinition) -> bool:
        # At most one era ahead of the territory's current era
        return era_index(tech.era) <= era_index(get_current_era(territory.technology)) + 1
