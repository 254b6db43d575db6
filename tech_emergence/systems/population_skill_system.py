import math
from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Dict, List
import numpy as np
from tech_emergence.core.ecs import System, EntityManager
from tech_emergence.core.config_manager import ConfigManager
from tech_emergence.core.results import ActionResult, ResearchError
from tech_emergence.components.data_components import TerritoryComponent, CharacterComponent
from tech_emergence.components.skill_component import SkillComponent
from tech_emergence.components.tags import IsTerritory
from tech_emergence.world.skill_graph import SkillGraph, SkillTier, TIER_BOUNDARIES, get_skill_tier
from tech_emergence.world.knowledge_store import KnowledgeStore, PopulationSkillStat
from tech_emergence.utils.logger import Logger

class AccumulationStrategy(Enum):
    """How the per-tick batch gain and per-event practice gain combine."""
    ADDITIVE_BOTH = "additive_both"
    BATCH_ONLY = "batch_only"
    INCREMENTAL_ONLY = "incremental_only"

@dataclass
class KnowledgeArea:
    skill: str
    skilled_count: int
    expert_count: int
    average_level: float

@dataclass
class KnowledgeSummary:
    strong_areas: List[KnowledgeArea] = field(default_factory=list)
    weak_areas: List[KnowledgeArea] = field(default_factory=list)
    all_skills: Dict[str, PopulationSkillStat] = field(default_factory=dict)

def _is_level(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and not math.isnan(value)

def _area(row: PopulationSkillStat) -> KnowledgeArea:
    return KnowledgeArea(row.skill_id, row.skilled_count, row.expert_count, row.average_level)

class PopulationSkillSystem(System):
    """
    Turns the skill maps of living characters into per-territory statistics and
    keeps the collective knowledge ledger for each (territory, skill).
    """

    def __init__(self, entity_manager: EntityManager, skill_graph: SkillGraph,
                 knowledge_store: KnowledgeStore, config_manager: ConfigManager):
        self.entity_manager = entity_manager
        self.skill_graph = skill_graph
        self.knowledge_store = knowledge_store
        self.config_manager = config_manager

        self._skill_index = {skill_id: i for i, skill_id in enumerate(skill_graph.skill_ids)}
        self._boundaries = np.array(TIER_BOUNDARIES, dtype=np.float64)

    @property
    def strategy(self) -> AccumulationStrategy:
        value = self.config_manager.get("knowledge.accumulation_strategy", AccumulationStrategy.ADDITIVE_BOTH.value)
        try:
            return AccumulationStrategy(value)
        except ValueError:
            Logger.error(f"Unknown accumulation strategy '{value}', using additive_both")
            return AccumulationStrategy.ADDITIVE_BOTH

    def update(self, tick: int):
        for territory_id, _, _ in self.entity_manager.get_entities_with(IsTerritory, TerritoryComponent):
            self.aggregate_population_skills(territory_id, tick)

    def aggregate_population_skills(self, territory_id: int, tick: int):
        territory = self.entity_manager.get_component(territory_id, TerritoryComponent)
        if territory is None:
            Logger.debug(f"Aggregation skipped, territory {territory_id} not found", tick)
            return
        population = territory.population
        if population <= 0:
            return

        # 1. Flatten (skill, level) pairs of living characters
        skill_rows = []
        levels = []
        living = self.entity_manager.get_entities_where(
            CharacterComponent, lambda c: c.territory_id == territory_id and c.is_alive
        )
        for entity in living:
            skill_comp = self.entity_manager.get_component(entity, SkillComponent)
            if skill_comp is None:
                continue
            for skill_id, level in skill_comp.skills.items():
                row = self._skill_index.get(skill_id)
                if row is None or not _is_level(level):
                    continue
                skill_rows.append(row)
                levels.append(level)

        n_skills = len(self._skill_index)
        rows = np.asarray(skill_rows, dtype=np.int64)
        values = np.clip(np.asarray(levels, dtype=np.float64), 0.0, 100.0)

        # 2. Bucket by tier: counts[skill, tier]
        tiers = np.searchsorted(self._boundaries, values, side="right")
        counts = np.bincount(rows * 4 + tiers, minlength=n_skills * 4).reshape(n_skills, 4)
        sums = np.bincount(rows, weights=values, minlength=n_skills)
        expert_mask = tiers >= SkillTier.EXPERT.value
        expert_sums = np.bincount(rows[expert_mask], weights=values[expert_mask], minlength=n_skills)

        weights = np.array([
            self.config_manager.get("knowledge.tier_weights.novice", 0.1),
            self.config_manager.get("knowledge.tier_weights.skilled", 0.5),
            self.config_manager.get("knowledge.tier_weights.expert", 1.5),
            self.config_manager.get("knowledge.tier_weights.legendary", 3.0),
        ])
        gains = counts @ weights
        add_batch = self.strategy != AccumulationStrategy.INCREMENTAL_ONLY

        # 3. Upsert one row per known skill, practiced or not
        for skill_id, i in self._skill_index.items():
            novice, skilled, expert, legendary = (int(c) for c in counts[i])
            practitioners = novice + skilled + expert + legendary
            experts = expert + legendary

            stat = self.knowledge_store.get_or_create(territory_id, skill_id)
            stat.novice_count = novice
            stat.skilled_count = skilled
            stat.expert_count = expert
            stat.legendary_count = legendary
            stat.skilled_percent = (skilled + experts) / population * 100
            stat.expert_percent = experts / population * 100
            stat.total_skill_points = float(sums[i])
            stat.average_level = float(sums[i]) / practitioners if practitioners > 0 else 0.0
            stat.average_expert_level = float(expert_sums[i]) / experts if experts > 0 else 0.0

            # A repeat pass within the same tick adds to that tick's gain
            same_tick = stat.last_updated_tick == tick
            if add_batch:
                gain = float(gains[i])
                stat.collective_knowledge += gain
                stat.knowledge_gain_this_tick = stat.knowledge_gain_this_tick + gain if same_tick else gain
            elif not same_tick:
                stat.knowledge_gain_this_tick = 0.0
            stat.last_updated_tick = tick

    def record_skill_practice(self, territory_id: int, skill_id: str, improvement: float):
        """Called by the profession layer whenever a character improves a skill."""
        stat = self.knowledge_store.get(territory_id, skill_id)
        if stat is None:
            return
        if self.strategy == AccumulationStrategy.BATCH_ONLY:
            return

        bonus = improvement * self.config_manager.get("knowledge.practice_multiplier", 0.5)
        stat.collective_knowledge = max(0.0, stat.collective_knowledge + bonus)
        stat.knowledge_gain_this_tick += bonus

    def apply_knowledge_decay(self, territory_id: int, deceased_entity: int):
        """Called by the lifecycle layer when a character of the territory dies."""
        skill_comp = self.entity_manager.get_component(deceased_entity, SkillComponent)
        if skill_comp is None:
            return

        factors = {
            SkillTier.NOVICE: self.config_manager.get("knowledge.decay_factors.novice", 0.01),
            SkillTier.SKILLED: self.config_manager.get("knowledge.decay_factors.skilled", 0.02),
            SkillTier.EXPERT: self.config_manager.get("knowledge.decay_factors.expert", 0.05),
            SkillTier.LEGENDARY: self.config_manager.get("knowledge.decay_factors.legendary", 0.1),
        }

        for skill_id, level in skill_comp.skills.items():
            if not _is_level(level):
                continue
            stat = self.knowledge_store.get(territory_id, skill_id)
            if stat is None:
                continue
            factor = factors[get_skill_tier(level)]
            stat.collective_knowledge = max(0.0, stat.collective_knowledge * (1 - factor))

    def get_knowledge_summary(self, territory_id: int) -> KnowledgeSummary:
        rows = self.knowledge_store.for_territory(territory_id)
        # sorted() is stable, ties keep insertion order
        ranked = sorted(rows, key=lambda r: r.expert_percent, reverse=True)

        strong_expert = self.config_manager.get("knowledge.summary.strong_expert_percent", 5)
        strong_skilled = self.config_manager.get("knowledge.summary.strong_skilled_percent", 15)
        strong_limit = self.config_manager.get("knowledge.summary.strong_limit", 5)
        weak_limit = self.config_manager.get("knowledge.summary.weak_limit", 3)

        strong = [r for r in ranked if r.expert_percent >= strong_expert or r.skilled_percent >= strong_skilled]
        weak = [
            r for r in ranked
            if r.expert_percent < strong_expert and r.skilled_percent < strong_skilled and r.skilled_count > 0
        ]

        return KnowledgeSummary(
            strong_areas=[_area(r) for r in strong[:strong_limit]],
            weak_areas=[_area(r) for r in weak[-weak_limit:]] if weak_limit > 0 else [],
            all_skills={r.skill_id: r for r in rows},
        )

    def hold_knowledge_festival(self, territory_id: int, tick: int) -> ActionResult:
        territory = self.entity_manager.get_component(territory_id, TerritoryComponent)
        if territory is None:
            return ActionResult.failure(ResearchError.NOT_FOUND, "Territory not found")

        food_cost = self.config_manager.get("knowledge.festival.food_cost", 10)
        wealth_cost = self.config_manager.get("knowledge.festival.wealth_cost", 5)
        if territory.food < food_cost or territory.wealth < wealth_cost:
            return ActionResult.failure(
                ResearchError.INSUFFICIENT_RESOURCE,
                f"A festival needs {food_cost} food and {wealth_cost} wealth",
            )

        territory.food -= food_cost
        territory.wealth -= wealth_cost
        territory.happiness = min(100.0, territory.happiness + self.config_manager.get("knowledge.festival.happiness_gain", 5))

        knowledge_gain = self.config_manager.get("knowledge.festival.knowledge_gain", 10)
        rows = self.knowledge_store.for_territory(territory_id)
        for stat in rows:
            stat.collective_knowledge += knowledge_gain
            stat.knowledge_gain_this_tick += knowledge_gain

        Logger.knowledge(f"{territory.name} held a knowledge festival ({len(rows)} skills shared)", tick)
        return ActionResult(success=True, message="Festival held, skills shared across the population")
