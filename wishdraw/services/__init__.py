from wishdraw.services.assignment import draw_names
from wishdraw.services.errors import (
    AssignmentError,
    AssignmentExhaustedError,
    ExchangeStateError,
    InfeasibleAssignmentError,
)
from wishdraw.services.feasibility import check_feasible

__all__ = [
    "AssignmentError",
    "AssignmentExhaustedError",
    "ExchangeStateError",
    "InfeasibleAssignmentError",
    "check_feasible",
    "draw_names",
]
