from tech_emergence.core.ecs import EntityManager
from tech_emergence.core.config_manager import ConfigManager
from tech_emergence.core.random_source import RandomSource
from tech_emergence.core.results import ResearchResult, EspionageResult, ResearchError
from tech_emergence.components.data_components import TerritoryComponent
from tech_emergence.world.diplomacy_store import DiplomacyStore, RelationshipStatus, BLOCKING_STATUSES
from tech_emergence.world.event_log import EventLog, HistoricalEvent
from tech_emergence.systems.research_system import ResearchSystem
from tech_emergence.utils.logger import Logger

class TechExchangeSystem:
    """Moves research progress between territories, by gift or by theft."""

    def __init__(self, entity_manager: EntityManager, research_system: ResearchSystem,
                 diplomacy_store: DiplomacyStore, event_log: EventLog, config_manager: ConfigManager,
                 rng: RandomSource):
        self.entity_manager = entity_manager
        self.research_system = research_system
        self.tech_store = research_system.tech_store
        self.tech_catalog = research_system.tech_catalog
        self.diplomacy_store = diplomacy_store
        self.event_log = event_log
        self.config_manager = config_manager
        self.rng = rng

    def share_technology(self, from_id: int, to_id: int, tech_id: str, tick: int) -> ResearchResult:
        source = self.entity_manager.get_component(from_id, TerritoryComponent)
        target = self.entity_manager.get_component(to_id, TerritoryComponent)
        if source is None or target is None:
            return ResearchResult.failure(ResearchError.NOT_FOUND, "Territory not found")

        relationship = self.diplomacy_store.get(from_id, to_id)
        if relationship is None or relationship.status in BLOCKING_STATUSES:
            return ResearchResult.failure(
                ResearchError.RELATIONSHIP_BLOCKED, "Cannot share technology with hostile nations"
            )

        if not self.tech_store.is_researched(from_id, tech_id):
            return ResearchResult.failure(ResearchError.NOT_FOUND, "Source does not have this technology")

        if self.tech_store.is_researched(to_id, tech_id):
            return ResearchResult.failure(ResearchError.ALREADY_COMPLETED, "Target already has this technology")

        tech = self.tech_catalog.get(tech_id)
        if tech is None:
            return ResearchResult.failure(ResearchError.NOT_FOUND, "Technology not found")

        shared = tech.knowledge_cost * self.config_manager.get("exchange.share_fraction", 0.5)
        row = self.research_system.accumulate_progress(to_id, tech, shared, tick)
        relationship.adjust_trust(self.config_manager.get("exchange.share_trust_gain", 10))

        Logger.diplomacy(f"{source.name} shared {tech.name} with {target.name}", tick)
        return ResearchResult(success=True, progress=row.research_progress, completed=row.researched)

    def steal_technology(self, thief_id: int, target_id: int, tick: int) -> EspionageResult:
        thief = self.entity_manager.get_component(thief_id, TerritoryComponent)
        target = self.entity_manager.get_component(target_id, TerritoryComponent)
        if thief is None or target is None:
            return EspionageResult.failure(ResearchError.NOT_FOUND, "Territory not found")

        thief_known = self.tech_store.researched_ids(thief_id)
        stealable = sorted(
            tech_id for tech_id in self.tech_store.researched_ids(target_id)
            if tech_id not in thief_known and tech_id in self.tech_catalog
        )
        if not stealable:
            return EspionageResult.failure(ResearchError.NOTHING_AVAILABLE, "No technologies to steal")

        # Draw order is fixed: detection, success, then the pick
        detection_chance = self.config_manager.get("espionage.detection_chance", 0.4)
        detected = self.rng.random() > 1 - detection_chance
        success_chance = (
            thief.influence / 100 * self.config_manager.get("espionage.influence_weight", 0.5)
            + self.config_manager.get("espionage.base_success", 0.2)
        )
        relationship = self.diplomacy_store.get(thief_id, target_id)

        if self.rng.random() < success_chance:
            tech = self.tech_catalog.get(self.rng.choice(stealable))
            self.research_system.accumulate_progress(thief_id, tech, tech.knowledge_cost, tick)

            if detected:
                penalty = self.config_manager.get("espionage.trust_penalty_detected_success", 30)
                if relationship is not None:
                    hostile_below = self.config_manager.get("espionage.hostile_trust_threshold", -50)
                    if relationship.trust - penalty < hostile_below:
                        relationship.status = RelationshipStatus.HOSTILE
                    relationship.adjust_trust(-penalty)
                self.event_log.record(HistoricalEvent(
                    tick=tick,
                    kind="espionage_discovered",
                    territory_id=target_id,
                    target_territory_id=thief_id,
                    title="Espionage Discovered",
                    description=f"Spies from {thief.name} were caught stealing secrets from {target.name}!",
                    severity="negative",
                ))
                Logger.diplomacy(f"{thief.name} was caught stealing {tech.name} from {target.name}", tick)
            else:
                Logger.diplomacy(f"{thief.name} stole {tech.name} from {target.name}", tick)

            return EspionageResult(success=True, message=f"Stole {tech.name}", stolen_tech=tech.tech_id, detected=detected)

        if detected and relationship is not None:
            relationship.adjust_trust(-self.config_manager.get("espionage.trust_penalty_detected_failure", 20))
        Logger.diplomacy(f"{thief.name} failed to steal from {target.name} (detected={detected})", tick)
        return EspionageResult(success=False, message="Espionage failed", detected=detected)
