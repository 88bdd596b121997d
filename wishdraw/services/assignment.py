from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence

from loguru import logger

from wishdraw.models import Assignment, Exclusion, Participant
from wishdraw.services.errors import AssignmentExhaustedError, InfeasibleAssignmentError
from wishdraw.services.exclusions import ExclusionMap, build_exclusion_map, search_assignment
from wishdraw.services.feasibility import check_feasible

MAX_RANDOM_ATTEMPTS = 1000


def _make_rng(seed: Optional[int]) -> random.Random:
    if seed is None:
        return random.SystemRandom()
    return random.Random(seed)


def random_greedy_attempt(
    participants: Sequence[Participant],
    exclusion_map: ExclusionMap,
    rng: random.Random,
) -> Optional[List[Assignment]]:
    givers = list(participants)
    rng.shuffle(givers)
    available = list(participants)
    assignments: List[Assignment] = []

    for giver in givers:
        excluded = exclusion_map.get(giver.id, set())
        valid_receivers = [receiver for receiver in available if receiver.id not in excluded]
        if not valid_receivers:
            return None

        receiver = rng.choice(valid_receivers)
        assignments.append(Assignment(giver_id=giver.id, receiver_id=receiver.id))
        available.remove(receiver)

    return assignments


def backtracking_assignment(
    participants: Sequence[Participant],
    exclusion_map: ExclusionMap,
    rng: random.Random,
) -> Optional[List[Assignment]]:
    receiver_indices = search_assignment(participants, exclusion_map, rng=rng)
    if receiver_indices is None:
        return None
    return [
        Assignment(giver_id=giver.id, receiver_id=participants[receiver_index].id)
        for giver, receiver_index in zip(participants, receiver_indices)
    ]


def draw_names(
    participants: Sequence[Participant],
    exclusions: Optional[Iterable[Exclusion]] = None,
    seed: Optional[int] = None,
    max_attempts: int = MAX_RANDOM_ATTEMPTS,
) -> List[Assignment]:
    participants = list(participants)
    exclusions = list(exclusions or [])

    validation = check_feasible(participants, exclusions)
    if not validation:
        logger.bind(participants=len(participants), exclusions=len(exclusions)).info(
            "Draw rejected: {reason}", reason=validation.reason
        )
        raise InfeasibleAssignmentError(validation.reason or "Invalid exclusions")

    rng = _make_rng(seed)
    exclusion_map = build_exclusion_map(participants, exclusions)

    for attempt in range(1, max_attempts + 1):
        assignments = random_greedy_attempt(participants, exclusion_map, rng)
        if assignments is not None:
            logger.bind(participants=len(participants), attempt=attempt).debug(
                "Draw solved by random greedy attempt"
            )
            return assignments

    logger.bind(participants=len(participants), exclusions=len(exclusions)).warning(
        "Random attempts exhausted after {attempts}, falling back to backtracking",
        attempts=max_attempts,
    )
    assignments = backtracking_assignment(participants, exclusion_map, rng)
    if assignments is not None:
        return assignments

    logger.bind(participants=len(participants), exclusions=len(exclusions)).error(
        "Backtracking failed after feasibility check passed"
    )
    raise AssignmentExhaustedError("Failed to generate valid assignments")
