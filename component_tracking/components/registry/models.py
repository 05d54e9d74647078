"""
Registry component - Data models.

Tagged results, error kinds and shell-layer inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from component_tracking.domain.entities import Identity

T = TypeVar("T")

# --- Errors ---


class ErrorKind(str, Enum):
    """Why a registry call was rejected."""

    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_ROLE = "invalid_role"
    CONTRACT_PAUSED = "contract_paused"
    INVALID_STATUS = "invalid_status"
    INVALID_TARGET = "invalid_target"
    BATCH_TOO_LARGE = "batch_too_large"


# Numeric contract codes. Paused and invalid status share 104.
ERROR_CODES: dict[ErrorKind, int] = {
    ErrorKind.UNAUTHORIZED: 100,
    ErrorKind.NOT_FOUND: 101,
    ErrorKind.ALREADY_EXISTS: 102,
    ErrorKind.INVALID_ROLE: 103,
    ErrorKind.CONTRACT_PAUSED: 104,
    ErrorKind.INVALID_STATUS: 104,
    ErrorKind.INVALID_TARGET: 105,
    ErrorKind.BATCH_TOO_LARGE: 106,
}


@dataclass(frozen=True)
class RegistryError:
    """Registry rejection."""

    kind: ErrorKind
    message: str

    @property
    def code(self) -> int:
        return ERROR_CODES[self.kind]


class RegistryStateError(RuntimeError):
    """
    Raised when registry storage breaks its own invariants.

    Never returned through RegistryOutput: it signals a corrupted state
    object, not a bad request.
    """


# --- Output Models ---


@dataclass(frozen=True)
class RegistryOutput(Generic[T]):
    """Result of a registry operation: a value or an error, never both."""

    value: T | None = None
    error: RegistryError | None = None

    @property
    def success(self) -> bool:
        return self.error is None


def ok(value: T) -> RegistryOutput[T]:
    return RegistryOutput(value=value)


def fail(kind: ErrorKind, message: str) -> RegistryOutput[T]:
    return RegistryOutput(error=RegistryError(kind=kind, message=message))


# --- Input Models ---


@dataclass(frozen=True)
class ComponentEntry:
    """One component of a batch registration."""

    serial_number: str
    material: str


@dataclass(frozen=True)
class IsAdminInput:
    caller: Identity


@dataclass(frozen=True)
class SetPausedInput:
    caller: Identity
    pause: bool


@dataclass(frozen=True)
class AssignRoleInput:
    caller: Identity
    user: Identity
    role: int


@dataclass(frozen=True)
class RegisterComponentInput:
    caller: Identity
    serial_number: str
    material: str


@dataclass(frozen=True)
class RegisterBatchInput:
    caller: Identity
    entries: tuple[ComponentEntry, ...]


@dataclass(frozen=True)
class AddLifecycleEventInput:
    caller: Identity
    component_id: int
    status: int
    notes: str = ""


@dataclass(frozen=True)
class GetComponentInput:
    component_id: int


@dataclass(frozen=True)
class GetLifecycleEventInput:
    component_id: int
    event_index: int


@dataclass(frozen=True)
class GetEventCountInput:
    component_id: int


@dataclass(frozen=True)
class GetRoleInput:
    user: Identity
