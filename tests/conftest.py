"""Shared fixtures and pytest configuration for all archrecon tests.

The ``webshop`` fixtures mirror the scenario used throughout the builder
tests: composite C with instances i1:TypeA and i2:TypeB.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from archrecon.builder.assembly import AssemblyConnectorBuilder
from archrecon.diagnostics import RecordingDiagnostics
from archrecon.model.structure import (
    ComponentType,
    CompositeStructure,
    Port,
    PortRole,
    SubcomponentInstance,
)

PROJECT_ROOT = Path(__file__).parent.parent
CONFIGS_DIR = PROJECT_ROOT / "configs"


# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def configs_dir() -> Path:
    return CONFIGS_DIR


@pytest.fixture
def builder_config_path() -> Path:
    return CONFIGS_DIR / "builder.yaml"


@pytest.fixture
def model_config_path() -> Path:
    return CONFIGS_DIR / "model" / "webshop.yaml"


@pytest.fixture
def duplicate_model_config_path() -> Path:
    return CONFIGS_DIR / "model" / "duplicate_instances.yaml"


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

@dataclass
class Scenario:
    composite: CompositeStructure
    type_a: ComponentType
    type_b: ComponentType
    port_a: Port
    port_b: Port
    i1: SubcomponentInstance
    i2: SubcomponentInstance


@pytest.fixture
def scenario() -> Scenario:
    """Composite C with i1:TypeA (requires pA) and i2:TypeB (provides pB)."""
    type_a = ComponentType("TypeA")
    type_b = ComponentType("TypeB")
    port_a = type_a.add_port("pA", PortRole.REQUIRED)
    port_b = type_b.add_port("pB", PortRole.PROVIDED)
    composite = CompositeStructure("C")
    i1 = composite.add_subcomponent("i1", type_a)
    i2 = composite.add_subcomponent("i2", type_b)
    return Scenario(composite, type_a, type_b, port_a, port_b, i1, i2)


@pytest.fixture
def recorder() -> RecordingDiagnostics:
    return RecordingDiagnostics()


@pytest.fixture
def builder(recorder: RecordingDiagnostics) -> AssemblyConnectorBuilder:
    return AssemblyConnectorBuilder(diagnostics=recorder)
