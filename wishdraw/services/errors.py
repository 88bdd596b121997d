from __future__ import annotations


class AssignmentError(RuntimeError):
    code = "INTERNAL_ERROR"
    status_code = 500


class InfeasibleAssignmentError(AssignmentError):
    code = "BAD_REQUEST"
    status_code = 400

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class AssignmentExhaustedError(AssignmentError):
    pass


class ExchangeStateError(RuntimeError):
    code = "BAD_REQUEST"
    status_code = 400
