"""chatbot/types.py

Tagged result types shared by the resolution pipeline.

A remote call produces a :class:`RemoteReply`; the pipeline produces a
:class:`Resolution`.  Both carry an explicit status so callers never have to
inspect reply text to find out whether something went wrong.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass
from enum import StrEnum


class RemoteStatus(StrEnum):
    """Outcome of a single remote generation attempt."""

    TEXT = "text"
    EMPTY = "empty"
    FAILURE = "failure"


class FailureReason(StrEnum):
    """Why a remote attempt produced no usable text."""

    NOT_CONFIGURED = "not_configured"
    CONNECTION_ERROR = "connection_error"
    HTTP_STATUS = "http_status"
    INVALID_BODY = "invalid_body"
    UNRECOGNIZED_SHAPE = "unrecognized_shape"


_PARSE_FAILURES: frozenset[FailureReason] = frozenset(
    {FailureReason.INVALID_BODY, FailureReason.UNRECOGNIZED_SHAPE}
)


@dataclass(frozen=True)
class RemoteReply:
    """Result of one call to the generative endpoint.

    Attributes:
        status: Whether the call yielded text, nothing, or failed.
        text: Generated text for ``TEXT``; the parser placeholder for parse
            failures; empty otherwise.
        reason: Populated only when ``status`` is ``FAILURE``.
        model: Model identifier the attempt was made against.
    """

    status: RemoteStatus
    text: str = ""
    reason: FailureReason | None = None
    model: str = ""

    @classmethod
    def ok(cls, text: str, model: str = "") -> RemoteReply:
        return cls(status=RemoteStatus.TEXT, text=text, model=model)

    @classmethod
    def empty(cls, model: str = "") -> RemoteReply:
        return cls(status=RemoteStatus.EMPTY, model=model)

    @classmethod
    def failure(
        cls, reason: FailureReason, model: str = "", text: str = ""
    ) -> RemoteReply:
        return cls(status=RemoteStatus.FAILURE, text=text, reason=reason, model=model)

    @property
    def has_text(self) -> bool:
        return self.status is RemoteStatus.TEXT

    @property
    def is_parse_failure(self) -> bool:
        return self.status is RemoteStatus.FAILURE and self.reason in _PARSE_FAILURES


class ReplySource(StrEnum):
    """Which pipeline stage produced the final reply."""

    LOCAL = "local"
    REMOTE = "remote"
    HEURISTIC = "heuristic"
    # Remote answered, but the body could not be read.  Text is a placeholder.
    PARSE_FAILURE = "parse_failure"


@dataclass(frozen=True)
class Resolution:
    """Final reply handed to the caller, tagged with its origin."""

    text: str
    source: ReplySource

    @property
    def usable(self) -> bool:
        return self.source is not ReplySource.PARSE_FAILURE
