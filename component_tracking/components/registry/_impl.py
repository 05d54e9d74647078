"""
ComponentRegistry - Component and lifecycle ledger.

Tracks manufactured components, their lifecycle events and the roles
allowed to record them.

Functional Core - owns the in-memory ledger state.

Invariants:
- Component ids are allocated 1, 2, 3, ... and never reused
- Every registered component has an event counter
- Event indices for a component run 1..counter without gaps
- A rejected call leaves the state untouched
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from component_tracking.adapters.clock import BlockClock
from component_tracking.domain.entities import (
    Component,
    Identity,
    LifecycleEvent,
    LifecycleStatus,
    Role,
)
from component_tracking.domain.policy import RolePolicy
from component_tracking.rules.models import RegistryRules

from .models import (
    ComponentEntry,
    ErrorKind,
    RegistryOutput,
    RegistryStateError,
    fail,
    ok,
)
from .ports import ClockPort

logger = logging.getLogger(__name__)


# --- Ledger State ---


@dataclass
class RegistryState:
    """Contract storage for one registry instance."""

    admin: Identity
    paused: bool = False
    last_component_id: int = 0
    roles: dict[Identity, int] = field(default_factory=dict)
    components: dict[int, Component] = field(default_factory=dict)
    lifecycle_events: dict[tuple[int, int], LifecycleEvent] = field(default_factory=dict)
    event_counters: dict[int, int] = field(default_factory=dict)


# --- Registry Service ---


class ComponentRegistry:
    """
    Component registry service.

    Every mutating call takes the caller identity explicitly and checks
    pause state and roles before touching storage.
    """

    def __init__(
        self,
        rules: RegistryRules | None = None,
        clock: ClockPort | None = None,
        state: RegistryState | None = None,
    ) -> None:
        """Initialize service."""
        self._rules = rules or RegistryRules()
        self._clock = clock or BlockClock(self._rules.genesis_time)
        self._state = state or RegistryState(admin=self._rules.admin)
        self._policy = RolePolicy(self._rules, admin=self._state.admin)

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def admin(self) -> Identity:
        return self._state.admin

    @property
    def paused(self) -> bool:
        return self._state.paused

    @property
    def last_component_id(self) -> int:
        return self._state.last_component_id

    def _reject(self, operation: str, kind: ErrorKind, message: str) -> RegistryOutput[Any]:
        logger.debug("%s rejected (%s): %s", operation, kind.value, message)
        return fail(kind, message)

    def _check_can_record(self, operation: str, caller: Identity) -> RegistryOutput[Any] | None:
        """Shared gate for the production-data writes. Returns None if allowed."""
        if self._state.paused:
            return self._reject(operation, ErrorKind.CONTRACT_PAUSED, "Contract is paused")
        if not self._policy.can_record(caller, self._state.roles):
            return self._reject(
                operation,
                ErrorKind.UNAUTHORIZED,
                f"Caller {caller} has no role",
            )
        return None

    # --- Administration ---

    def is_admin(self, caller: Identity) -> bool:
        return self._policy.is_admin(caller)

    def set_paused(self, caller: Identity, pause: bool) -> RegistryOutput[bool]:
        """Toggle the pause switch. Admin only."""
        if not self.is_admin(caller):
            return self._reject("set_paused", ErrorKind.UNAUTHORIZED, "Only admin can pause")

        self._state.paused = pause
        logger.info("Registry %s by %s", "paused" if pause else "resumed", caller)
        return ok(pause)

    def assign_role(self, caller: Identity, user: Identity, role: int) -> RegistryOutput[bool]:
        """
        Assign SUPPLIER or REGULATOR to a user, replacing any previous role.

        Not affected by the pause switch.
        """
        if not self.is_admin(caller):
            return self._reject("assign_role", ErrorKind.UNAUTHORIZED, "Only admin can assign roles")
        if not self._policy.is_valid_target(user):
            return self._reject(
                "assign_role",
                ErrorKind.INVALID_TARGET,
                f"Cannot assign a role to {user}",
            )
        if not self._policy.is_assignable(role):
            return self._reject("assign_role", ErrorKind.INVALID_ROLE, f"Role {role} is not assignable")

        self._state.roles[user] = Role(role)
        logger.info("Assigned role %s to %s", Role(role).name, user)
        return ok(True)

    # --- Registration ---

    def register_component(
        self,
        caller: Identity,
        serial_number: str,
        material: str,
    ) -> RegistryOutput[int]:
        """
        Register a single component.

        Returns:
            Output holding the new component id.
        """
        denied = self._check_can_record("register_component", caller)
        if denied is not None:
            return denied

        component_id = self._state.last_component_id + 1
        if component_id in self._state.components:
            return self._reject(
                "register_component",
                ErrorKind.ALREADY_EXISTS,
                f"Component {component_id} already exists",
            )

        now = self._clock.now()
        self._state.components[component_id] = Component(
            serial_number=serial_number,
            material=material,
            producer=caller,
            created_at=now,
            updated_at=now,
        )
        self._state.event_counters[component_id] = 0
        self._state.last_component_id = component_id

        logger.info("Registered component %d (%s) for %s", component_id, serial_number, caller)
        return ok(component_id)

    def register_batch(
        self,
        caller: Identity,
        entries: Sequence[ComponentEntry],
    ) -> RegistryOutput[int]:
        """
        Register several components in one all-or-nothing call.

        New records are staged first and only merged into storage once
        every id has been checked, so a collision commits nothing.

        Returns:
            Output holding the id of the last component registered. An
            empty batch returns the current last id.
        """
        denied = self._check_can_record("register_batch", caller)
        if denied is not None:
            return denied

        if len(entries) > self._rules.max_batch_size:
            return self._reject(
                "register_batch",
                ErrorKind.BATCH_TOO_LARGE,
                f"Batch of {len(entries)} exceeds maximum of {self._rules.max_batch_size}",
            )

        now = self._clock.now()
        last_id = self._state.last_component_id
        staged: dict[int, Component] = {}

        for entry in entries:
            component_id = last_id + 1
            if component_id in self._state.components:
                return self._reject(
                    "register_batch",
                    ErrorKind.ALREADY_EXISTS,
                    f"Component {component_id} already exists",
                )
            staged[component_id] = Component(
                serial_number=entry.serial_number,
                material=entry.material,
                producer=caller,
                created_at=now,
                updated_at=now,
            )
            last_id = component_id

        # Commit
        self._state.components.update(staged)
        self._state.event_counters.update(dict.fromkeys(staged, 0))
        self._state.last_component_id = last_id

        logger.info("Registered batch of %d components for %s", len(staged), caller)
        return ok(last_id)

    # --- Lifecycle ---

    def add_lifecycle_event(
        self,
        caller: Identity,
        component_id: int,
        status: int,
        notes: str,
    ) -> RegistryOutput[int]:
        """
        Append a lifecycle event to a component.

        Statuses may be recorded in any order and repeated.

        Returns:
            Output holding the new 1-based event index.
        """
        denied = self._check_can_record("add_lifecycle_event", caller)
        if denied is not None:
            return denied

        component = self._state.components.get(component_id)
        if component is None:
            return self._reject(
                "add_lifecycle_event",
                ErrorKind.NOT_FOUND,
                f"Component {component_id} not found",
            )

        try:
            lifecycle_status = LifecycleStatus(status)
        except ValueError:
            return self._reject(
                "add_lifecycle_event",
                ErrorKind.INVALID_STATUS,
                f"Unknown lifecycle status {status}",
            )

        counter = self._state.event_counters.get(component_id)
        if counter is None:
            raise RegistryStateError(f"Component {component_id} has no event counter")

        event_index = counter + 1
        now = self._clock.now()
        self._state.lifecycle_events[(component_id, event_index)] = LifecycleEvent(
            status=lifecycle_status,
            timestamp=now,
            notes=notes,
            recorded_by=caller,
        )
        self._state.event_counters[component_id] = event_index
        self._state.components[component_id] = component.model_copy(update={"updated_at": now})

        logger.info(
            "Recorded %s for component %d as event %d",
            lifecycle_status.name,
            component_id,
            event_index,
        )
        return ok(event_index)

    # --- Reads ---

    def get_component(self, component_id: int) -> RegistryOutput[Component]:
        component = self._state.components.get(component_id)
        if component is None:
            return fail(ErrorKind.NOT_FOUND, f"Component {component_id} not found")
        return ok(component)

    def get_lifecycle_event(
        self,
        component_id: int,
        event_index: int,
    ) -> RegistryOutput[LifecycleEvent]:
        event = self._state.lifecycle_events.get((component_id, event_index))
        if event is None:
            return fail(
                ErrorKind.NOT_FOUND,
                f"Event {event_index} for component {component_id} not found",
            )
        return ok(event)

    def get_event_count(self, component_id: int) -> int:
        """Number of events recorded for a component; 0 if unknown."""
        return self._state.event_counters.get(component_id, 0)

    def get_role(self, user: Identity) -> int:
        """Role code for a user; 0 if unassigned."""
        return self._state.roles.get(user, Role.NONE)
