from __future__ import annotations

from typing import Iterable, Optional, Sequence

from wishdraw.models import Exclusion, FeasibilityResult, Participant
from wishdraw.services.exclusions import build_exclusion_map, search_assignment

TOO_FEW_PARTICIPANTS = "Need at least 2 participants"
DUPLICATE_PARTICIPANTS = "Participant ids must be unique"
IMPOSSIBLE_EXCLUSIONS = "The exclusion rules make it impossible to create valid assignments for everyone"


def too_many_exclusions(name: str) -> str:
    return f"{name} has too many exclusions and cannot be assigned to anyone"


def check_feasible(
    participants: Sequence[Participant],
    exclusions: Optional[Iterable[Exclusion]] = None,
) -> FeasibilityResult:
    if len(participants) < 2:
        return FeasibilityResult.rejected(TOO_FEW_PARTICIPANTS)

    if len({participant.id for participant in participants}) != len(participants):
        return FeasibilityResult.rejected(DUPLICATE_PARTICIPANTS)

    exclusion_map = build_exclusion_map(participants, exclusions)

    # Necessary condition only; catches the common case before the search.
    for participant in participants:
        if len(exclusion_map[participant.id]) >= len(participants):
            return FeasibilityResult.rejected(too_many_exclusions(participant.name or "A participant"))

    if search_assignment(participants, exclusion_map) is None:
        return FeasibilityResult.rejected(IMPOSSIBLE_EXCLUSIONS)

    return FeasibilityResult.ok()
