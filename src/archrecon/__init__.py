"""archrecon — assembly connector reconstruction for component architecture models."""

__version__ = "0.1.0"

from archrecon.builder import (
    AssemblyConnectorBuilder,
    StructuralInvariantViolation,
    build_assembly_connector,
    resolve_instance,
)
from archrecon.diagnostics import Diagnostics, LoggerDiagnostics, RecordingDiagnostics
from archrecon.model import (
    ComponentType,
    CompositeStructure,
    Connector,
    Port,
    PortRole,
    SubcomponentEndpoint,
    SubcomponentInstance,
)

__all__ = [
    # Builder
    "AssemblyConnectorBuilder",
    "StructuralInvariantViolation",
    "build_assembly_connector",
    "resolve_instance",
    # Diagnostics
    "Diagnostics",
    "LoggerDiagnostics",
    "RecordingDiagnostics",
    # Model
    "ComponentType",
    "CompositeStructure",
    "Connector",
    "Port",
    "PortRole",
    "SubcomponentEndpoint",
    "SubcomponentInstance",
]
