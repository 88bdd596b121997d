from __future__ import annotations

from typing import List, Optional

from loguru import logger

from wishdraw.core.config import Settings, load_settings
from wishdraw.models import (
    Assignment,
    Exchange,
    ExchangeStatus,
    Exclusion,
    FeasibilityResult,
    Participant,
    ParticipantId,
)
from wishdraw.services.assignment import draw_names
from wishdraw.services.errors import ExchangeStateError
from wishdraw.services.feasibility import check_feasible


def _require_open(exchange: Exchange, message: str) -> None:
    if exchange.status != ExchangeStatus.OPEN:
        raise ExchangeStateError(message)


def _participant_ids(exchange: Exchange) -> set:
    return {participant.id for participant in exchange.participants}


def add_participant(exchange: Exchange, participant: Participant) -> None:
    with exchange.lock:
        _require_open(exchange, "Cannot add participants after names have been drawn")
        if participant.id in _participant_ids(exchange):
            raise ExchangeStateError("Participant is already in this exchange")
        exchange.participants.append(participant)


def remove_participant(exchange: Exchange, participant_id: ParticipantId) -> None:
    with exchange.lock:
        _require_open(exchange, "Cannot remove participants after names have been drawn")
        if participant_id not in _participant_ids(exchange):
            raise ExchangeStateError("Participant not found")
        exchange.participants = [p for p in exchange.participants if p.id != participant_id]
        exchange.exclusions = [e for e in exchange.exclusions if not e.involves(participant_id)]


def add_exclusion(exchange: Exchange, exclusion: Exclusion) -> None:
    with exchange.lock:
        _require_open(exchange, "Cannot add exclusions after names have been drawn")
        known = _participant_ids(exchange)
        if exclusion.participant_a not in known or exclusion.participant_b not in known:
            raise ExchangeStateError("Both participants must belong to this exchange")
        if exclusion.participant_a == exclusion.participant_b:
            raise ExchangeStateError("A participant cannot be excluded from themselves")
        if any(e.same_pair(exclusion.participant_a, exclusion.participant_b) for e in exchange.exclusions):
            raise ExchangeStateError("This exclusion already exists")
        exchange.exclusions.append(exclusion)


def remove_exclusion(
    exchange: Exchange,
    participant_a: ParticipantId,
    participant_b: ParticipantId,
) -> bool:
    with exchange.lock:
        _require_open(exchange, "Cannot remove exclusions after names have been drawn")
        remaining = [e for e in exchange.exclusions if not e.same_pair(participant_a, participant_b)]
        removed = len(remaining) != len(exchange.exclusions)
        exchange.exclusions = remaining
    return removed


def check_exchange(exchange: Exchange) -> FeasibilityResult:
    return check_feasible(exchange.participants, exchange.exclusions)


def draw_exchange(
    exchange: Exchange,
    settings: Optional[Settings] = None,
    seed: Optional[int] = None,
) -> List[Assignment]:
    settings = settings or load_settings()
    with exchange.lock:
        _require_open(exchange, "Names have already been drawn")
        if len(exchange.participants) < 2:
            raise ExchangeStateError("Need at least 2 participants to draw names")

        assignments = draw_names(
            exchange.participants,
            exchange.exclusions,
            seed=seed,
            max_attempts=settings.draw_max_attempts,
        )

        exchange.assignments = assignments
        exchange.status = ExchangeStatus.DRAWN

    logger.bind(exchange_id=exchange.id, participants=len(assignments)).info("Names drawn")
    return assignments


def redraw_exchange(exchange: Exchange) -> None:
    with exchange.lock:
        exchange.assignments = []
        exchange.status = ExchangeStatus.OPEN
    logger.bind(exchange_id=exchange.id).info("Exchange reset for redraw")


def assignment_for(exchange: Exchange, giver_id: ParticipantId) -> Optional[Assignment]:
    if exchange.status != ExchangeStatus.DRAWN:
        raise ExchangeStateError("Names have not been drawn yet")
    for assignment in exchange.assignments:
        if assignment.giver_id == giver_id:
            return assignment
    return None
