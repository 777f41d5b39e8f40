"""Query input state and request lifecycle models."""

from dataclasses import dataclass
from enum import StrEnum

from wanniweather.models.common import Unit


class OutcomeStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class QueryState:
    city: str = ""
    unit: Unit = Unit.METRIC


@dataclass(frozen=True)
class RequestOutcome:
    status: OutcomeStatus
    message: str | None = None  # set only when failed

    @classmethod
    def idle(cls) -> "RequestOutcome":
        return cls(OutcomeStatus.IDLE)

    @classmethod
    def loading(cls) -> "RequestOutcome":
        return cls(OutcomeStatus.LOADING)

    @classmethod
    def success(cls) -> "RequestOutcome":
        return cls(OutcomeStatus.SUCCESS)

    @classmethod
    def failed(cls, message: str) -> "RequestOutcome":
        return cls(OutcomeStatus.FAILED, message)

    @property
    def is_loading(self) -> bool:
        return self.status == OutcomeStatus.LOADING

    @property
    def is_failed(self) -> bool:
        return self.status == OutcomeStatus.FAILED
