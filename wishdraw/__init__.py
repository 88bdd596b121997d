from wishdraw.models import (
    Assignment,
    Exchange,
    ExchangeStatus,
    Exclusion,
    ExclusionReason,
    FeasibilityResult,
    Participant,
)
from wishdraw.services import (
    AssignmentError,
    AssignmentExhaustedError,
    ExchangeStateError,
    InfeasibleAssignmentError,
    check_feasible,
    draw_names,
)

__all__ = [
    "Assignment",
    "AssignmentError",
    "AssignmentExhaustedError",
    "Exchange",
    "ExchangeStateError",
    "ExchangeStatus",
    "Exclusion",
    "ExclusionReason",
    "FeasibilityResult",
    "InfeasibleAssignmentError",
    "Participant",
    "check_feasible",
    "draw_names",
]
