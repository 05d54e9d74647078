"""
Regression tests for registry invariants.

R1: Non-admin administration leaves state untouched
R2: Component ids are 1, 2, 3, ... across single and batch registration
R3: Rejected writes never move last_component_id or event counters
R4: Event indices are contiguous per component
R5: Reads are idempotent
"""

import copy

import pytest

from component_tracking.adapters.clock import BlockClock
from component_tracking.components.registry import (
    ComponentEntry,
    ComponentRegistry,
    ErrorKind,
)
from component_tracking.domain.entities import LifecycleStatus, Role
from component_tracking.rules.models import DEFAULT_ADMIN

ADMIN = DEFAULT_ADMIN
SUPPLIER = "ST2CY5..."
OUTSIDERS = ["ST2CY5...", "ST3NB...", "", DEFAULT_ADMIN.lower()]


@pytest.fixture
def busy_registry(supplier_registry):
    """Registry with a little history."""
    supplier_registry.register_component(SUPPLIER, "SN1", "Steel")
    supplier_registry.register_batch(SUPPLIER, [ComponentEntry("SN2", "Iron"), ComponentEntry("SN3", "Copper")])
    supplier_registry.add_lifecycle_event(SUPPLIER, 2, LifecycleStatus.TESTED, "ok")
    return supplier_registry


@pytest.mark.parametrize("caller", OUTSIDERS)
def test_R1_non_admin_administration(busy_registry, caller):
    before = copy.deepcopy(busy_registry.state)

    paused = busy_registry.set_paused(caller, True)
    assigned = busy_registry.assign_role(caller, "ST9ZZ...", Role.REGULATOR)

    assert paused.error.kind == ErrorKind.UNAUTHORIZED
    assert assigned.error.kind == ErrorKind.UNAUTHORIZED
    assert busy_registry.state == before


def test_R2_ids_sequential_across_operations(supplier_registry):
    supplier_registry.assign_role(ADMIN, "ST3NB...", Role.REGULATOR)
    ids = []
    ids.append(supplier_registry.register_component(SUPPLIER, "A", "x").value)
    ids.append(supplier_registry.register_batch("ST3NB...", [ComponentEntry("B", "x"), ComponentEntry("C", "x")]).value)
    ids.append(supplier_registry.register_component(ADMIN, "D", "x").value)
    ids.append(supplier_registry.register_batch(SUPPLIER, [ComponentEntry("E", "x")]).value)

    assert ids == [1, 3, 4, 5]
    assert sorted(supplier_registry.state.components) == [1, 2, 3, 4, 5]
    assert [supplier_registry.get_component(i).value.serial_number for i in range(1, 6)] == list("ABCDE")


def test_R3_rejected_writes_keep_counters(busy_registry):
    before = copy.deepcopy(busy_registry.state)

    busy_registry.register_batch(SUPPLIER, [ComponentEntry("SN", "x")] * 101)
    busy_registry.register_component("ST7..", "SN", "x")
    busy_registry.add_lifecycle_event(SUPPLIER, 2, 5, "bad status")
    busy_registry.add_lifecycle_event(SUPPLIER, 99, 1, "no such component")
    busy_registry.set_paused(ADMIN, True)
    busy_registry.register_component(SUPPLIER, "SN", "x")
    busy_registry.add_lifecycle_event(SUPPLIER, 1, 1, "paused")
    busy_registry.set_paused(ADMIN, False)

    assert busy_registry.state == before


def test_R4_contiguous_event_indices():
    clock = BlockClock(1)
    registry = ComponentRegistry(clock=clock)
    registry.register_batch(ADMIN, [ComponentEntry("A", "x"), ComponentEntry("B", "y")])

    for step in range(6):
        clock.advance()
        registry.add_lifecycle_event(ADMIN, 1 + step % 2, LifecycleStatus((step % 4) + 1), f"step {step}")

    state = registry.state
    for component_id in state.components:
        count = state.event_counters[component_id]
        keys = sorted(index for (cid, index) in state.lifecycle_events if cid == component_id)
        assert keys == list(range(1, count + 1))
        assert registry.get_lifecycle_event(component_id, count + 1).error.kind == ErrorKind.NOT_FOUND


def test_R5_reads_idempotent(busy_registry):
    first = (
        busy_registry.get_component(2),
        busy_registry.get_role(SUPPLIER),
        busy_registry.get_event_count(2),
        busy_registry.get_event_count(404),
    )
    second = (
        busy_registry.get_component(2),
        busy_registry.get_role(SUPPLIER),
        busy_registry.get_event_count(2),
        busy_registry.get_event_count(404),
    )
    assert first == second


def test_supplier_pause_scenario(supplier_registry):
    """Supplier registers, records PRODUCED, then pause blocks further writes."""
    assert supplier_registry.register_component(SUPPLIER, "SN123", "Titanium").value == 1
    assert supplier_registry.add_lifecycle_event(SUPPLIER, 1, LifecycleStatus.PRODUCED, "Produced").value == 1

    component = supplier_registry.get_component(1).value
    assert component.producer == SUPPLIER
    assert component.updated_at == 100
    assert supplier_registry.get_lifecycle_event(1, 1).value.recorded_by == SUPPLIER

    supplier_registry.set_paused(ADMIN, True)

    blocked = supplier_registry.register_component(SUPPLIER, "SN124", "Titanium")
    assert blocked.error.kind == ErrorKind.CONTRACT_PAUSED
    assert supplier_registry.get_component(1).success
