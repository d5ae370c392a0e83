"""
Result types for calls to the remote proposals API.

Every store operation returns either ``Ok(value)`` or
``Err(failure)`` where ``failure`` is a :class:`TransportFailure`
describing what went wrong.  Callers decide what a failure means for
them: ``unwrap_or`` substitutes a default, ``unwrap`` raises
:class:`TransportError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, NoReturn, Optional, TypeVar, Union

T = TypeVar("T")
D = TypeVar("D")


@dataclass(frozen=True)
class TransportFailure:
    """A failed request/response exchange.

    Attributes:
        operation: Name of the store operation, e.g. ``getProposal id=1``.
        message: Human readable reason taken from the response body or
            the transport exception.
        status_code: HTTP status of the response, or ``None`` when no
            response was received (connection errors, timeouts) or the
            body could not be decoded.
    """

    operation: str
    message: str
    status_code: Optional[int] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "operation": self.operation,
            "status_code": self.status_code,
            "message": self.message,
        }


class TransportError(Exception):
    """Raised by :meth:`Err.unwrap`; carries the underlying failure."""

    def __init__(self, failure: TransportFailure) -> None:
        self.failure = failure
        status = failure.status_code if failure.status_code is not None else "-"
        super().__init__(f"{failure.operation} failed ({status}): {failure.message}")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    failure: TransportFailure

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise TransportError(self.failure)

    def unwrap_or(self, default: D) -> D:
        return default


Result = Union[Ok[T], Err]
