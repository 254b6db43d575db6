"""
Population skill aggregation and the collective knowledge ledger.
"""

import pytest

from tech_emergence.core.results import ResearchError
from tech_emergence.systems.population_skill_system import AccumulationStrategy


# ─────────────────────────────────────────────────────
# Aggregation
# ─────────────────────────────────────────────────────

class TestAggregatePopulationSkills:
    def test_five_experts_in_population_of_hundred(self, world):
        territory = world.add_territory(population=100)
        for _ in range(5):
            world.add_character(territory, {"smithing": 75})

        world.population.aggregate_population_skills(territory, tick=1)

        stat = world.knowledge.get(territory, "smithing")
        assert stat.expert_count == 5
        assert stat.expert_percent == pytest.approx(5.0)
        assert stat.skilled_percent == pytest.approx(5.0)
        assert stat.average_level == pytest.approx(75.0)
        assert stat.average_expert_level == pytest.approx(75.0)
        assert stat.knowledge_gain_this_tick == pytest.approx(7.5)
        assert stat.collective_knowledge == pytest.approx(7.5)
        assert stat.last_updated_tick == 1

    def test_tier_counts_sum_to_practitioners(self, world):
        territory = world.add_territory(population=50)
        levels = [0, 10, 29, 30, 55, 69, 70, 80, 89, 90, 100]
        for level in levels:
            world.add_character(territory, {"farming": level})

        world.population.aggregate_population_skills(territory, tick=1)

        stat = world.knowledge.get(territory, "farming")
        assert (stat.novice_count, stat.skilled_count, stat.expert_count, stat.legendary_count) == (3, 3, 3, 2)
        assert stat.practitioner_count == len(levels)
        assert stat.total_skill_points == pytest.approx(sum(levels))
        assert stat.average_level == pytest.approx(sum(levels) / len(levels))
        assert stat.average_expert_level == pytest.approx((70 + 80 + 89 + 90 + 100) / 5)
        # Percentages are against the territory population, not practitioners
        assert stat.skilled_percent == pytest.approx(8 / 50 * 100)
        assert stat.expert_percent == pytest.approx(5 / 50 * 100)
        assert stat.knowledge_gain_this_tick == pytest.approx(3 * 0.1 + 3 * 0.5 + 3 * 1.5 + 2 * 3.0)

    def test_every_known_skill_gets_a_row(self, world):
        territory = world.add_territory(population=10)
        world.add_character(territory, {"foraging": 12})

        world.population.aggregate_population_skills(territory, tick=1)

        assert len(world.knowledge.for_territory(territory)) == len(world.skill_graph)
        untouched = world.knowledge.get(territory, "nuclear_physics")
        assert untouched.practitioner_count == 0
        assert untouched.average_level == 0
        assert untouched.average_expert_level == 0
        assert untouched.collective_knowledge == 0

    def test_dead_and_foreign_characters_are_ignored(self, world):
        home = world.add_territory(population=10)
        abroad = world.add_territory(name="Elsewhere", population=10)
        world.add_character(home, {"hunting": 50})
        world.add_character(home, {"hunting": 95}, alive=False)
        world.add_character(abroad, {"hunting": 95})

        world.population.aggregate_population_skills(home, tick=1)

        stat = world.knowledge.get(home, "hunting")
        assert stat.practitioner_count == 1
        assert stat.legendary_count == 0

    def test_unknown_skills_and_bad_levels_are_ignored(self, world):
        territory = world.add_territory(population=10)
        world.add_character(territory, {"juggling": 80, "fishing": "high", "weaving": float("nan"), "pottery": 40})

        world.population.aggregate_population_skills(territory, tick=1)

        assert world.knowledge.get(territory, "juggling") is None
        assert world.knowledge.get(territory, "fishing").practitioner_count == 0
        assert world.knowledge.get(territory, "weaving").practitioner_count == 0
        assert world.knowledge.get(territory, "pottery").skilled_count == 1

    def test_levels_are_clipped(self, world):
        territory = world.add_territory(population=10)
        world.add_character(territory, {"fishing": 140})
        world.add_character(territory, {"fishing": -20})

        world.population.aggregate_population_skills(territory, tick=1)

        stat = world.knowledge.get(territory, "fishing")
        assert stat.legendary_count == 1
        assert stat.novice_count == 1
        assert stat.total_skill_points == pytest.approx(100.0)

    def test_missing_territory_is_a_no_op(self, world):
        world.population.aggregate_population_skills(999, tick=1)
        assert len(world.knowledge) == 0

    def test_empty_population_is_a_no_op(self, world):
        territory = world.add_territory(population=0)
        world.add_character(territory, {"fishing": 50})
        world.population.aggregate_population_skills(territory, tick=1)
        assert len(world.knowledge) == 0

    def test_double_aggregation_double_accumulates(self, world):
        territory = world.add_territory(population=100)
        for _ in range(5):
            world.add_character(territory, {"smithing": 75})

        world.population.aggregate_population_skills(territory, tick=1)
        first = world.knowledge.get(territory, "smithing").expert_percent
        world.population.aggregate_population_skills(territory, tick=1)

        stat = world.knowledge.get(territory, "smithing")
        assert stat.expert_percent == first
        assert stat.expert_count == 5
        assert stat.collective_knowledge == pytest.approx(15.0)
        assert stat.knowledge_gain_this_tick == pytest.approx(15.0)

    def test_next_tick_starts_a_fresh_gain(self, world):
        territory = world.add_territory(population=100)
        for _ in range(5):
            world.add_character(territory, {"smithing": 75})

        world.population.aggregate_population_skills(territory, tick=1)
        world.population.aggregate_population_skills(territory, tick=1)
        world.population.aggregate_population_skills(territory, tick=2)

        stat = world.knowledge.get(territory, "smithing")
        assert stat.knowledge_gain_this_tick == pytest.approx(7.5)
        assert stat.collective_knowledge == pytest.approx(22.5)

    def test_knowledge_never_decreases_under_aggregation(self, world):
        territory = world.add_territory(population=20)
        character = world.add_character(territory, {"herbalism": 95})
        history = []
        for tick in range(1, 6):
            if tick == 3:
                # The expert forgets everything, knowledge must still hold
                world.em.destroy_entity(character)
            world.population.aggregate_population_skills(territory, tick)
            history.append(world.knowledge.get(territory, "herbalism").collective_knowledge)
        assert history == sorted(history)

    def test_update_covers_every_territory(self, world):
        a = world.add_territory(name="A", population=10)
        b = world.add_territory(name="B", population=10)
        world.add_character(a, {"fishing": 40})
        world.add_character(b, {"fishing": 40})

        world.population.update(tick=4)

        assert world.knowledge.get(a, "fishing").last_updated_tick == 4
        assert world.knowledge.get(b, "fishing").last_updated_tick == 4


# ─────────────────────────────────────────────────────
# Practice recording and decay
# ─────────────────────────────────────────────────────

class TestRecordSkillPractice:
    def test_adds_half_of_improvement(self, world):
        territory = world.add_territory(population=10)
        world.population.aggregate_population_skills(territory, tick=1)

        world.population.record_skill_practice(territory, "pottery", 4.0)

        stat = world.knowledge.get(territory, "pottery")
        assert stat.collective_knowledge == pytest.approx(2.0)
        assert stat.knowledge_gain_this_tick == pytest.approx(2.0)

    def test_without_row_is_a_no_op(self, world):
        territory = world.add_territory(population=10)
        world.population.record_skill_practice(territory, "pottery", 4.0)
        assert world.knowledge.get(territory, "pottery") is None


class TestApplyKnowledgeDecay:
    @pytest.fixture
    def seeded(self, world):
        territory = world.add_territory(population=10)
        world.population.aggregate_population_skills(territory, tick=1)
        for skill_id in ("smithing", "farming", "fishing", "weaving"):
            world.knowledge.get(territory, skill_id).collective_knowledge = 1000.0
        return territory

    def test_legendary_death_costs_ten_percent(self, world, seeded):
        deceased = world.add_character(seeded, {"smithing": 95}, alive=False)
        world.population.apply_knowledge_decay(seeded, deceased)
        assert world.knowledge.get(seeded, "smithing").collective_knowledge == pytest.approx(900.0)

    def test_factor_follows_the_deceased_tier(self, world, seeded):
        deceased = world.add_character(seeded, {"fishing": 10, "weaving": 40, "farming": 75}, alive=False)
        world.population.apply_knowledge_decay(seeded, deceased)
        assert world.knowledge.get(seeded, "fishing").collective_knowledge == pytest.approx(990.0)
        assert world.knowledge.get(seeded, "weaving").collective_knowledge == pytest.approx(980.0)
        assert world.knowledge.get(seeded, "farming").collective_knowledge == pytest.approx(950.0)
        assert world.knowledge.get(seeded, "smithing").collective_knowledge == pytest.approx(1000.0)

    def test_unknown_skills_and_missing_components_are_ignored(self, world, seeded):
        deceased = world.add_character(seeded, {"juggling": 99}, alive=False)
        world.population.apply_knowledge_decay(seeded, deceased)
        world.population.apply_knowledge_decay(seeded, 12345)
        assert world.knowledge.get(seeded, "smithing").collective_knowledge == pytest.approx(1000.0)


# ─────────────────────────────────────────────────────
# Accumulation strategies
# ─────────────────────────────────────────────────────

class TestAccumulationStrategy:
    def _setup(self, world):
        territory = world.add_territory(population=10)
        world.add_character(territory, {"smithing": 75})
        return territory

    def test_default_is_additive_both(self, world):
        assert world.population.strategy == AccumulationStrategy.ADDITIVE_BOTH
        territory = self._setup(world)
        world.population.aggregate_population_skills(territory, tick=1)
        world.population.record_skill_practice(territory, "smithing", 2.0)
        assert world.knowledge.get(territory, "smithing").collective_knowledge == pytest.approx(2.5)

    def test_batch_only_ignores_practice(self, world, config):
        config.set("knowledge.accumulation_strategy", "batch_only")
        territory = self._setup(world)
        world.population.aggregate_population_skills(territory, tick=1)
        world.population.record_skill_practice(territory, "smithing", 2.0)
        assert world.knowledge.get(territory, "smithing").collective_knowledge == pytest.approx(1.5)

    def test_incremental_only_skips_batch_gain(self, world, config):
        config.set("knowledge.accumulation_strategy", "incremental_only")
        territory = self._setup(world)
        world.population.aggregate_population_skills(territory, tick=1)
        stat = world.knowledge.get(territory, "smithing")
        assert stat.expert_count == 1
        assert stat.collective_knowledge == 0

        world.population.record_skill_practice(territory, "smithing", 2.0)
        assert stat.collective_knowledge == pytest.approx(1.0)
        assert stat.knowledge_gain_this_tick == pytest.approx(1.0)

        world.population.aggregate_population_skills(territory, tick=2)
        assert stat.knowledge_gain_this_tick == 0
        assert stat.collective_knowledge == pytest.approx(1.0)

    def test_unknown_value_falls_back(self, world, config):
        config.set("knowledge.accumulation_strategy", "sometimes")
        assert world.population.strategy == AccumulationStrategy.ADDITIVE_BOTH


# ─────────────────────────────────────────────────────
# Summary and festival
# ─────────────────────────────────────────────────────

class TestKnowledgeSummary:
    def _row(self, world, territory, skill_id, expert, skilled, skilled_count=1):
        row = world.knowledge.get_or_create(territory, skill_id)
        row.expert_percent = expert
        row.skilled_percent = skilled
        row.skilled_count = skilled_count
        return row

    def test_strong_and_weak_areas(self, world):
        territory = world.add_territory(population=100)
        for i, expert in enumerate([12, 10, 9, 8, 7, 6]):
            self._row(world, territory, f"strong_{i}", expert, expert + 5)
        self._row(world, territory, "skilled_only", 0, 20)
        for i, skilled in enumerate([4, 3, 2, 1]):
            self._row(world, territory, f"weak_{i}", 0, skilled)
        self._row(world, territory, "nobody", 0, 0, skilled_count=0)

        summary = world.population.get_knowledge_summary(territory)

        assert [a.skill for a in summary.strong_areas] == ["strong_0", "strong_1", "strong_2", "strong_3", "strong_4"]
        assert [a.skill for a in summary.weak_areas] == ["weak_1", "weak_2", "weak_3"]
        assert len(summary.all_skills) == 12

    def test_empty_territory(self, world):
        summary = world.population.get_knowledge_summary(42)
        assert summary.strong_areas == []
        assert summary.weak_areas == []
        assert summary.all_skills == {}


class TestKnowledgeFestival:
    def test_festival_spends_and_shares(self, world):
        territory = world.add_territory(population=10, food=12.0, wealth=6.0, happiness=97.0)
        world.population.aggregate_population_skills(territory, tick=1)

        result = world.population.hold_knowledge_festival(territory, tick=1)

        assert result.success
        t = world.territory(territory)
        assert t.food == pytest.approx(2.0)
        assert t.wealth == pytest.approx(1.0)
        assert t.happiness == 100.0
        stat = world.knowledge.get(territory, "pottery")
        assert stat.collective_knowledge == pytest.approx(10.0)
        assert stat.knowledge_gain_this_tick == pytest.approx(10.0)

    def test_festival_needs_resources(self, world):
        territory = world.add_territory(population=10, food=9.0, wealth=100.0)
        world.population.aggregate_population_skills(territory, tick=1)

        result = world.population.hold_knowledge_festival(territory, tick=1)

        assert not result.success
        assert result.error == ResearchError.INSUFFICIENT_RESOURCE
        assert world.territory(territory).wealth == 100.0
        assert world.knowledge.get(territory, "pottery").collective_knowledge == 0

    def test_festival_missing_territory(self, world):
        result = world.population.hold_knowledge_festival(7, tick=1)
        assert result.error == ResearchError.NOT_FOUND
