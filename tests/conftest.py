from pathlib import Path

import pytest

from component_tracking.adapters.clock import FixedClock
from component_tracking.components.registry import ComponentRegistry, create_registry
from component_tracking.domain.entities import Role
from component_tracking.rules.loader import load_rules
from component_tracking.rules.models import DEFAULT_ADMIN, RegistryRules

SUPPLIER = "ST2CY5..."


@pytest.fixture
def rules() -> RegistryRules:
    """
    Rules loaded from the project's rules.yaml, so the shipped config is
    exercised by every registry test.
    """
    rules_path = Path(__file__).parent.parent / "rules.yaml"
    return load_rules(rules_path)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(100)


@pytest.fixture
def registry(rules: RegistryRules, clock: FixedClock) -> ComponentRegistry:
    """Fresh registry with no roles assigned."""
    return create_registry(rules=rules, clock=clock)


@pytest.fixture
def supplier_registry(registry: ComponentRegistry) -> ComponentRegistry:
    """Registry where SUPPLIER already holds the supplier role."""
    result = registry.assign_role(DEFAULT_ADMIN, SUPPLIER, Role.SUPPLIER)
    assert result.success
    return registry
