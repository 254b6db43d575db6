import pytest

from conftest import requirement
from tech_emergence.systems.tech_requirements import calculate_skill_bonus, check_tech_requirements
from tech_emergence.world.knowledge_store import KnowledgeStore, PopulationSkillStat

TERRITORY = 1


def stat(skill_id, expert=0.0, skilled=0.0, avg=0.0, avg_expert=0.0, knowledge=0.0):
    return PopulationSkillStat(
        territory_id=TERRITORY,
        skill_id=skill_id,
        expert_percent=expert,
        skilled_percent=skilled,
        average_level=avg,
        average_expert_level=avg_expert,
        collective_knowledge=knowledge,
    )


def store_with(*rows):
    store = KnowledgeStore()
    for row in rows:
        store.put(row)
    return store


class TestCheckTechRequirements:
    def test_empty_requirements_are_met(self):
        check = check_tech_requirements(KnowledgeStore(), TERRITORY, [])
        assert check.met is True
        assert check.progress == 100
        assert check.missing == []
        assert check.details == []

    def test_absent_row_counts_as_zero(self):
        check = check_tech_requirements(KnowledgeStore(), TERRITORY, [requirement("smithing", expert=5)])
        assert check.met is False
        assert check.progress == 0
        assert check.missing == ["smithing: need 5.0% experts, have 0.0%"]
        assert check.details[0].current.expert_percent == 0
        assert check.details[0].satisfied is False

    def test_all_clauses_met(self):
        store = store_with(stat("literacy", expert=10, skilled=30, avg=55))
        check = check_tech_requirements(store, TERRITORY, [requirement("literacy", expert=8, skilled=20, avg=50)])
        assert check.met is True
        assert check.progress == 100
        assert check.details[0].satisfied is True

    def test_shortfall_messages(self):
        store = store_with(stat("trading", expert=1.3, skilled=7.5, avg=12.34))
        check = check_tech_requirements(store, TERRITORY, [requirement("trading", expert=3, skilled=10, avg=25)])
        assert check.missing == [
            "trading: need 3.0% experts, have 1.3%",
            "trading: need 10.0% skilled, have 7.5%",
            "trading: need avg level 25, have 12.3",
        ]

    def test_progress_averages_every_clause_equally(self):
        # Three clauses on literacy at 100% and one on law at 0%: 300 / 4 = 75
        store = store_with(stat("literacy", expert=10, skilled=30, avg=60))
        check = check_tech_requirements(store, TERRITORY, [
            requirement("literacy", expert=5, skilled=10, avg=50),
            requirement("law", skilled=5),
        ])
        assert check.progress == 75
        assert check.met is False
        assert [d.satisfied for d in check.details] == [True, False]

    def test_progress_rounds_half_up(self):
        # (50 + 75) / 2 = 62.5
        store = store_with(stat("a", skilled=5), stat("b", skilled=7.5))
        check = check_tech_requirements(store, TERRITORY, [requirement("a", skilled=10), requirement("b", skilled=10)])
        assert check.progress == 63

    def test_zero_and_none_clauses_are_inactive(self):
        check = check_tech_requirements(KnowledgeStore(), TERRITORY, [requirement("a", expert=0, skilled=None)])
        assert check.met is True
        assert check.progress == 100
        assert len(check.details) == 1

    def test_per_clause_progress_is_capped(self):
        store = store_with(stat("a", skilled=50), stat("b", skilled=0))
        check = check_tech_requirements(store, TERRITORY, [requirement("a", skilled=10), requirement("b", skilled=10)])
        assert check.progress == 50


class TestCalculateSkillBonus:
    def test_empty_requirements(self):
        assert calculate_skill_bonus([], {}) == 3.0

    def test_no_rows_falls_back_to_base(self):
        assert calculate_skill_bonus([requirement("smithing", expert=5)], {}) == 3.0

    def test_expert_surplus_mastery_and_knowledge(self):
        stats = {"smithing": stat("smithing", expert=9, avg_expert=80, knowledge=400)}
        bonus = calculate_skill_bonus([requirement("smithing", expert=5)], stats)
        # 3 + 4 * 0.5 + 10 * 0.1 + 400 / 200
        assert bonus == pytest.approx(8.0)

    def test_knowledge_bonus_is_capped_at_five(self):
        stats = {"smithing": stat("smithing", knowledge=10_000)}
        assert calculate_skill_bonus([requirement("smithing", skilled=5)], stats) == pytest.approx(8.0)

    def test_surplus_needs_expert_clause(self):
        stats = {"smithing": stat("smithing", expert=50)}
        assert calculate_skill_bonus([requirement("smithing", skilled=5)], stats) == pytest.approx(3.0)

    def test_averages_only_requirements_with_rows(self):
        stats = {"a": stat("a", knowledge=200)}
        bonus = calculate_skill_bonus([requirement("a", skilled=1), requirement("b", skilled=1)], stats)
        assert bonus == pytest.approx(4.0)
