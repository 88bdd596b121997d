from __future__ import annotations

import enum
import threading
from dataclasses import dataclass, field
from typing import Hashable, List, Optional

ParticipantId = Hashable


class ExclusionReason(str, enum.Enum):
    SPOUSE = "spouse"
    SAME_HOUSEHOLD = "same_household"
    CUSTOM = "custom"


class ExchangeStatus(str, enum.Enum):
    OPEN = "open"
    DRAWN = "drawn"


@dataclass(frozen=True)
class Participant:
    id: ParticipantId
    name: str


@dataclass(frozen=True)
class Exclusion:
    participant_a: ParticipantId
    participant_b: ParticipantId
    reason: Optional[ExclusionReason] = None

    def involves(self, participant_id: ParticipantId) -> bool:
        return participant_id in (self.participant_a, self.participant_b)

    def same_pair(self, participant_a: ParticipantId, participant_b: ParticipantId) -> bool:
        return {self.participant_a, self.participant_b} == {participant_a, participant_b}


@dataclass(frozen=True)
class Assignment:
    giver_id: ParticipantId
    receiver_id: ParticipantId


@dataclass(frozen=True)
class FeasibilityResult:
    valid: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def ok(cls) -> "FeasibilityResult":
        return cls(valid=True)

    @classmethod
    def rejected(cls, reason: str) -> "FeasibilityResult":
        return cls(valid=False, reason=reason)


@dataclass
class Exchange:
    id: Hashable
    name: str
    status: ExchangeStatus = ExchangeStatus.OPEN
    participants: List[Participant] = field(default_factory=list)
    exclusions: List[Exclusion] = field(default_factory=list)
    assignments: List[Assignment] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def __repr__(self) -> str:
        return (
            "<Exchange(id={0}, name={1}, status={2}, participants={3})>"
        ).format(self.id, self.name, self.status.value, len(self.participants))
