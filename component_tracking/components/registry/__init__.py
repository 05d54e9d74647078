"""
Registry component - Component tracking ledger with role-based access.
"""

from ._impl import ComponentRegistry, RegistryState
from .component import (
    create_registry,
    run,
    run_add_lifecycle_event,
    run_assign_role,
    run_get_component,
    run_get_event_count,
    run_get_lifecycle_event,
    run_get_role,
    run_is_admin,
    run_register_batch,
    run_register_component,
    run_set_paused,
)
from .models import (
    ERROR_CODES,
    AddLifecycleEventInput,
    AssignRoleInput,
    ComponentEntry,
    ErrorKind,
    GetComponentInput,
    GetEventCountInput,
    GetLifecycleEventInput,
    GetRoleInput,
    IsAdminInput,
    RegisterBatchInput,
    RegisterComponentInput,
    RegistryError,
    RegistryOutput,
    RegistryStateError,
    SetPausedInput,
)
from .ports import ClockPort

__all__ = [
    # Entry points
    "create_registry",
    "run",
    "run_is_admin",
    "run_set_paused",
    "run_assign_role",
    "run_register_component",
    "run_register_batch",
    "run_add_lifecycle_event",
    "run_get_component",
    "run_get_lifecycle_event",
    "run_get_event_count",
    "run_get_role",
    # Input models
    "IsAdminInput",
    "SetPausedInput",
    "AssignRoleInput",
    "RegisterComponentInput",
    "RegisterBatchInput",
    "ComponentEntry",
    "AddLifecycleEventInput",
    "GetComponentInput",
    "GetLifecycleEventInput",
    "GetEventCountInput",
    "GetRoleInput",
    # Output models
    "RegistryOutput",
    "RegistryError",
    "ErrorKind",
    "ERROR_CODES",
    "RegistryStateError",
    # Service
    "ComponentRegistry",
    "RegistryState",
    # Ports
    "ClockPort",
]
