from dataclasses import dataclass
from enum import Enum
from typing import Optional

class ResearchError(Enum):
    NOT_FOUND = "not_found"
    ALREADY_COMPLETED = "already_completed"
    PREREQUISITE_UNMET = "prerequisite_unmet"
    FUTURE_ERA = "future_era"
    INSUFFICIENT_RESOURCE = "insufficient_resource"
    RELATIONSHIP_BLOCKED = "relationship_blocked"
    NOTHING_AVAILABLE = "nothing_available"

@dataclass
class ActionResult:
    """Outcome of a decision-handler entry point. Failures are returned, never raised."""
    success: bool
    error: Optional[ResearchError] = None
    message: str = ""

    @classmethod
    def failure(cls, error: ResearchError, message: str, **kwargs):
        return cls(success=False, error=error, message=message, **kwargs)

@dataclass
class ResearchResult(ActionResult):
    progress: Optional[float] = None
    completed: bool = False

@dataclass
class EspionageResult(ActionResult):
    stolen_tech: Optional[str] = None
    # Independent of success: a failed attempt can still be detected
    detected: bool = False

@dataclass
class AcademyResult(ActionResult):
    building_id: Optional[int] = None
