from __future__ import annotations

import random
from typing import Dict, Iterable, List, Optional, Sequence, Set

from loguru import logger

from wishdraw.models import Exclusion, Participant, ParticipantId

ExclusionMap = Dict[ParticipantId, Set[ParticipantId]]


def build_exclusion_map(
    participants: Sequence[Participant],
    exclusions: Optional[Iterable[Exclusion]],
) -> ExclusionMap:
    """Map every participant id to the receivers it may not give to, itself included."""
    exclusion_map: ExclusionMap = {participant.id: {participant.id} for participant in participants}

    for exclusion in exclusions or []:
        a, b = exclusion.participant_a, exclusion.participant_b
        if a not in exclusion_map or b not in exclusion_map:
            logger.bind(participant_a=a, participant_b=b).debug(
                "Ignoring exclusion for unknown participant"
            )
            continue
        exclusion_map[a].add(b)
        exclusion_map[b].add(a)

    return exclusion_map


def search_assignment(
    participants: Sequence[Participant],
    exclusion_map: ExclusionMap,
    rng: Optional[random.Random] = None,
) -> Optional[List[int]]:
    """
    Exhaustive backtracking over givers in input order.
    Returns a list where result[i] is the receiver index for participants[i],
    or None when no valid assignment exists. Candidate receivers are tried in
    index order unless an rng is given, in which case each decision point
    shuffles them. Uses an explicit stack, so group size is not bounded by
    the interpreter's recursion limit.
    """
    n = len(participants)
    assignment = [-1] * n
    used = [False] * n
    candidates: List[Optional[List[int]]] = [None] * n
    positions = [0] * n

    giver_index = 0
    while giver_index >= 0:
        if giver_index == n:
            return assignment

        if candidates[giver_index] is None:
            excluded = exclusion_map.get(participants[giver_index].id, set())
            receiver_indices = list(range(n))
            if rng is not None:
                rng.shuffle(receiver_indices)
            candidates[giver_index] = [
                index for index in receiver_indices if participants[index].id not in excluded
            ]
            positions[giver_index] = 0

        # Release the choice made the last time this giver was visited.
        previous = assignment[giver_index]
        if previous != -1:
            used[previous] = False
            assignment[giver_index] = -1

        options = candidates[giver_index]
        position = positions[giver_index]
        while position < len(options) and used[options[position]]:
            position += 1

        if position == len(options):
            candidates[giver_index] = None
            giver_index -= 1
            continue

        receiver_index = options[position]
        positions[giver_index] = position + 1
        assignment[giver_index] = receiver_index
        used[receiver_index] = True
        giver_index += 1

    return None
