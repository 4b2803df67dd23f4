"""archrecon.model — structural model of a reconstructed architecture.

Public API:
    ComponentType, Port, PortRole          — types and their interaction points
    SubcomponentInstance, CompositeStructure
    Connector, SubcomponentEndpoint
    StructureFactory, DefaultStructureFactory — injected object creation
    StructureLoader, ArchitectureModel     — model construction from config
"""
from archrecon.model.factory import DefaultStructureFactory, StructureFactory
from archrecon.model.loader import ArchitectureModel, StructureLoader
from archrecon.model.structure import (
    ComponentType,
    CompositeStructure,
    Connector,
    Port,
    PortRole,
    SubcomponentEndpoint,
    SubcomponentInstance,
)

__all__ = [
    "ComponentType",
    "CompositeStructure",
    "Connector",
    "Port",
    "PortRole",
    "SubcomponentEndpoint",
    "SubcomponentInstance",
    "StructureFactory",
    "DefaultStructureFactory",
    "StructureLoader",
    "ArchitectureModel",
]
