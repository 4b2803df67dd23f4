"""archrecon.builder — assembly connector construction.

Public API:
    AssemblyConnectorBuilder      — creates connectors from types or instances
    build_assembly_connector      — module-level shortcut with a default builder
    EndpointBuilder               — attaches endpoints to a connector
    resolve_instance              — finds the instance realizing a type
    InstanceLookup                — optional lookup result
    StructuralInvariantViolation  — several instances of one type in a composite
    InstanceNotFoundError         — InstanceLookup.unwrap() on an absent result
    UnresolvedEndpointError       — strict mode, no instance of a type
    WiringPlanner, WiringError    — applies wiring entries from config
"""
from archrecon.builder.assembly import AssemblyConnectorBuilder, build_assembly_connector
from archrecon.builder.endpoints import EndpointBuilder, UnresolvedEndpointError
from archrecon.builder.resolver import (
    InstanceLookup,
    InstanceNotFoundError,
    StructuralInvariantViolation,
    resolve_instance,
)
from archrecon.builder.wiring import WiringEntry, WiringError, WiringPlanner, parse_wiring_entry

__all__ = [
    "AssemblyConnectorBuilder",
    "build_assembly_connector",
    "EndpointBuilder",
    "UnresolvedEndpointError",
    "InstanceLookup",
    "InstanceNotFoundError",
    "StructuralInvariantViolation",
    "resolve_instance",
    "WiringEntry",
    "WiringError",
    "WiringPlanner",
    "parse_wiring_entry",
]
