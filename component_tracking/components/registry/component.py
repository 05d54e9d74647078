"""
Registry component - Component tracking ledger.

Role-gated registration of manufactured components and their lifecycle
events, with an admin pause switch.

Shell Layer - maps input models onto the registry service.

Invariants:
- I1: Only the admin pauses the registry or assigns roles
- I2: Pause blocks registration and lifecycle events, nothing else
- I3: Component ids are sequential and never reused
- I4: Batch registration commits every entry or none
"""

from __future__ import annotations

from component_tracking.domain.entities import Component, LifecycleEvent
from component_tracking.rules.models import RegistryRules

from ._impl import ComponentRegistry, RegistryState
from .models import (
    AddLifecycleEventInput,
    AssignRoleInput,
    GetComponentInput,
    GetEventCountInput,
    GetLifecycleEventInput,
    GetRoleInput,
    IsAdminInput,
    RegisterBatchInput,
    RegisterComponentInput,
    RegistryOutput,
    SetPausedInput,
    ok,
)
from .ports import ClockPort

RegistryInput = (
    IsAdminInput
    | SetPausedInput
    | AssignRoleInput
    | RegisterComponentInput
    | RegisterBatchInput
    | AddLifecycleEventInput
    | GetComponentInput
    | GetLifecycleEventInput
    | GetEventCountInput
    | GetRoleInput
)


def create_registry(
    rules: RegistryRules | None = None,
    clock: ClockPort | None = None,
    state: RegistryState | None = None,
) -> ComponentRegistry:
    """Create a registry with its own state; defaults come from RegistryRules()."""
    return ComponentRegistry(rules=rules, clock=clock, state=state)


# --- Component Entry Points ---


def run_is_admin(inp: IsAdminInput, *, registry: ComponentRegistry) -> RegistryOutput[bool]:
    return ok(registry.is_admin(inp.caller))


def run_set_paused(inp: SetPausedInput, *, registry: ComponentRegistry) -> RegistryOutput[bool]:
    return registry.set_paused(inp.caller, inp.pause)


def run_assign_role(inp: AssignRoleInput, *, registry: ComponentRegistry) -> RegistryOutput[bool]:
    return registry.assign_role(inp.caller, inp.user, inp.role)


def run_register_component(
    inp: RegisterComponentInput,
    *,
    registry: ComponentRegistry,
) -> RegistryOutput[int]:
    """
    Register a single component.

    Args:
        inp: Caller, serial number and material.
        registry: Registry service.

    Returns:
        RegistryOutput with the new component id or an error.
    """
    return registry.register_component(inp.caller, inp.serial_number, inp.material)


def run_register_batch(
    inp: RegisterBatchInput,
    *,
    registry: ComponentRegistry,
) -> RegistryOutput[int]:
    """
    Register a batch of components atomically.

    Args:
        inp: Caller and the ordered batch entries.
        registry: Registry service.

    Returns:
        RegistryOutput with the id of the last registered component.
    """
    return registry.register_batch(inp.caller, inp.entries)


def run_add_lifecycle_event(
    inp: AddLifecycleEventInput,
    *,
    registry: ComponentRegistry,
) -> RegistryOutput[int]:
    """
    Record a lifecycle event.

    Args:
        inp: Caller, component id, status code and notes.
        registry: Registry service.

    Returns:
        RegistryOutput with the new event index or an error.
    """
    return registry.add_lifecycle_event(inp.caller, inp.component_id, inp.status, inp.notes)


def run_get_component(
    inp: GetComponentInput,
    *,
    registry: ComponentRegistry,
) -> RegistryOutput[Component]:
    return registry.get_component(inp.component_id)


def run_get_lifecycle_event(
    inp: GetLifecycleEventInput,
    *,
    registry: ComponentRegistry,
) -> RegistryOutput[LifecycleEvent]:
    return registry.get_lifecycle_event(inp.component_id, inp.event_index)


def run_get_event_count(
    inp: GetEventCountInput,
    *,
    registry: ComponentRegistry,
) -> RegistryOutput[int]:
    # Never fails: unknown components count as zero
    return ok(registry.get_event_count(inp.component_id))


def run_get_role(inp: GetRoleInput, *, registry: ComponentRegistry) -> RegistryOutput[int]:
    return ok(int(registry.get_role(inp.user)))


def run(inp: RegistryInput, *, registry: ComponentRegistry) -> RegistryOutput:
    """
    Main entry point for the registry component.

    Dispatches to appropriate handler based on input type.

    Args:
        inp: Input object determining the operation.
        registry: Registry service.

    Returns:
        RegistryOutput from the matching handler.
    """
    if isinstance(inp, IsAdminInput):
        return run_is_admin(inp, registry=registry)
    elif isinstance(inp, SetPausedInput):
        return run_set_paused(inp, registry=registry)
    elif isinstance(inp, AssignRoleInput):
        return run_assign_role(inp, registry=registry)
    elif isinstance(inp, RegisterComponentInput):
        return run_register_component(inp, registry=registry)
    elif isinstance(inp, RegisterBatchInput):
        return run_register_batch(inp, registry=registry)
    elif isinstance(inp, AddLifecycleEventInput):
        return run_add_lifecycle_event(inp, registry=registry)
    elif isinstance(inp, GetComponentInput):
        return run_get_component(inp, registry=registry)
    elif isinstance(inp, GetLifecycleEventInput):
        return run_get_lifecycle_event(inp, registry=registry)
    elif isinstance(inp, GetEventCountInput):
        return run_get_event_count(inp, registry=registry)
    elif isinstance(inp, GetRoleInput):
        return run_get_role(inp, registry=registry)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
