import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence
from tech_emergence.world.knowledge_store import KnowledgeStore, PopulationSkillStat
from tech_emergence.world.tech_catalog import TechSkillRequirement

@dataclass
class SkillSnapshot:
    expert_percent: Optional[float] = None
    skilled_percent: Optional[float] = None
    average_level: Optional[float] = None

@dataclass
class RequirementDetail:
    skill: str
    required: SkillSnapshot
    current: SkillSnapshot
    satisfied: bool

@dataclass
class RequirementCheck:
    met: bool
    progress: int  # 0-100
    missing: List[str] = field(default_factory=list)
    details: List[RequirementDetail] = field(default_factory=list)

def _clause_active(threshold: Optional[float]) -> bool:
    return threshold is not None and threshold > 0

def _clause_progress(current: float, required: float) -> float:
    return min(100.0, current / required * 100)

def check_tech_requirements(store: KnowledgeStore, territory_id: int,
                            requirements: Sequence[TechSkillRequirement]) -> RequirementCheck:
    """
    Compare a territory's population statistics against a tech's skill thresholds.
    Progress is the unweighted mean over every active clause of every requirement,
    so a requirement with three clauses weighs three times one with a single clause.
    """
    if not requirements:
        return RequirementCheck(met=True, progress=100)

    missing = []
    details = []
    total_progress = 0.0
    clause_count = 0

    for req in requirements:
        stat = store.get(territory_id, req.skill)
        current_expert = stat.expert_percent if stat else 0.0
        current_skilled = stat.skilled_percent if stat else 0.0
        current_avg = stat.average_level if stat else 0.0
        satisfied = True

        if _clause_active(req.min_expert_percent):
            clause_count += 1
            total_progress += _clause_progress(current_expert, req.min_expert_percent)
            if current_expert < req.min_expert_percent:
                satisfied = False
                missing.append(
                    f"{req.skill}: need {req.min_expert_percent:.1f}% experts, have {current_expert:.1f}%"
                )

        if _clause_active(req.min_skilled_percent):
            clause_count += 1
            total_progress += _clause_progress(current_skilled, req.min_skilled_percent)
            if current_skilled < req.min_skilled_percent:
                satisfied = False
                missing.append(
                    f"{req.skill}: need {req.min_skilled_percent:.1f}% skilled, have {current_skilled:.1f}%"
                )

        if _clause_active(req.min_average_level):
            clause_count += 1
            total_progress += _clause_progress(current_avg, req.min_average_level)
            if current_avg < req.min_average_level:
                satisfied = False
                missing.append(
                    f"{req.skill}: need avg level {req.min_average_level:g}, have {current_avg:.1f}"
                )

        details.append(RequirementDetail(
            skill=req.skill,
            required=SkillSnapshot(req.min_expert_percent, req.min_skilled_percent, req.min_average_level),
            current=SkillSnapshot(current_expert, current_skilled, current_avg),
            satisfied=satisfied,
        ))

    overall = total_progress / clause_count if clause_count > 0 else 100.0
    # Round half up, not banker's rounding
    return RequirementCheck(
        met=len(missing) == 0,
        progress=int(math.floor(overall + 0.5)),
        missing=missing,
        details=details,
    )

def calculate_skill_bonus(requirements: Sequence[TechSkillRequirement],
                          current_stats: Dict[str, PopulationSkillStat]) -> float:
    """Research progress earned this tick by a territory that meets the requirements."""
    base = 3.0
    if not requirements:
        return base

    total_bonus = 0.0
    bonus_count = 0
    for req in requirements:
        stat = current_stats.get(req.skill)
        if stat is None:
            continue

        bonus = base
        # Surplus experts above the threshold
        if _clause_active(req.min_expert_percent):
            surplus = stat.expert_percent - req.min_expert_percent
            if surplus > 0:
                bonus += surplus * 0.5
        # Mastery of the experts themselves
        if stat.average_expert_level > 70:
            bonus += (stat.average_expert_level - 70) * 0.1
        bonus += min(5.0, stat.collective_knowledge / 200)

        total_bonus += bonus
        bonus_count += 1

    return total_bonus / bonus_count if bonus_count > 0 else base
