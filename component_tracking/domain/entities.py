from enum import IntEnum

from pydantic import BaseModel, ConfigDict

# --- Identities ---
# Opaque caller token, compared by value only.
Identity = str

# --- Enums ---


class Role(IntEnum):
    NONE = 0
    ADMIN = 1
    SUPPLIER = 2
    REGULATOR = 3


class LifecycleStatus(IntEnum):
    PRODUCED = 1
    TESTED = 2
    SHIPPED = 3
    DELIVERED = 4


ASSIGNABLE_ROLES = frozenset({Role.SUPPLIER, Role.REGULATOR})

# --- Ledger records ---


class Component(BaseModel):
    model_config = ConfigDict(frozen=True)

    serial_number: str
    material: str
    producer: Identity
    created_at: int
    updated_at: int


class LifecycleEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: LifecycleStatus
    timestamp: int
    notes: str
    recorded_by: Identity
