"""In-memory structural model of a reconstructed component architecture.

A CompositeStructure owns SubcomponentInstances and Connectors. Each instance
realizes exactly one ComponentType; each ComponentType exposes required and
provided Ports. Connectors own two SubcomponentEndpoints which reference
instances (and optionally one of their ports).

Model objects compare by identity, like the metamodel objects the analysis
pipeline produces: two ComponentTypes with the same name are still two types.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# ─── Ports and types ──────────────────────────────────────────────────────────

class PortRole(str, Enum):
    REQUIRED = "required"
    PROVIDED = "provided"


@dataclass(eq=False)
class Port:
    """Named interaction point of a ComponentType.

    Attributes:
        name: Port name, unique within its owning type.
        role: Whether the port requires or provides a service.
        owner: The ComponentType exposing the port (None for detached ports).
    """

    name: str
    role: PortRole
    owner: ComponentType | None = None

    @property
    def qualified_name(self) -> str:
        if self.owner is None:
            return self.name
        return f"{self.owner.name}.{self.name}"

    def __repr__(self) -> str:
        return f"Port({self.qualified_name!r}, {self.role.value})"


@dataclass(eq=False)
class ComponentType:
    """Reusable component specification exposing typed ports."""

    name: str
    ports: list[Port] = field(default_factory=list)

    def add_port(self, name: str, role: PortRole) -> Port:
        """Create a port owned by this type and return it.

        Raises:
            ValueError: If a port with the same name already exists.
        """
        if any(p.name == name for p in self.ports):
            raise ValueError(f"Component type {self.name!r} already has a port named {name!r}")
        port = Port(name=name, role=PortRole(role), owner=self)
        self.ports.append(port)
        return port

    def port(self, name: str) -> Port:
        for p in self.ports:
            if p.name == name:
                return p
        raise KeyError(f"Component type {self.name!r} has no port named {name!r}")

    @property
    def required_ports(self) -> list[Port]:
        return [p for p in self.ports if p.role is PortRole.REQUIRED]

    @property
    def provided_ports(self) -> list[Port]:
        return [p for p in self.ports if p.role is PortRole.PROVIDED]

    def __repr__(self) -> str:
        return f"ComponentType({self.name!r})"


# ─── Instances and connectors ─────────────────────────────────────────────────

@dataclass(eq=False)
class SubcomponentInstance:
    """Instantiation of exactly one ComponentType inside a CompositeStructure."""

    name: str
    realized_by: ComponentType

    def __repr__(self) -> str:
        return f"SubcomponentInstance({self.name!r}: {self.realized_by.name})"


@dataclass(eq=False)
class SubcomponentEndpoint:
    """One end of a Connector.

    ``subcomponent`` is None when the owning instance could not be resolved;
    such endpoints are tolerated and left for the caller to inspect.
    """

    subcomponent: SubcomponentInstance | None = None
    port: Port | None = None

    @property
    def is_resolved(self) -> bool:
        return self.subcomponent is not None


@dataclass(eq=False)
class Connector:
    """Connector owning its endpoints (source first, target second)."""

    endpoints: list[SubcomponentEndpoint] = field(default_factory=list)
    documentation: str = ""

    @property
    def source(self) -> SubcomponentEndpoint | None:
        return self.endpoints[0] if self.endpoints else None

    @property
    def target(self) -> SubcomponentEndpoint | None:
        return self.endpoints[1] if len(self.endpoints) > 1 else None

    @property
    def is_resolved(self) -> bool:
        return len(self.endpoints) == 2 and all(e.is_resolved for e in self.endpoints)


@dataclass(eq=False)
class CompositeStructure:
    """Composite owning ordered subcomponents and connectors.

    ``add_subcomponent`` does not check the one-instance-per-type rule; the
    rule is enforced when an instance is looked up by type.
    """

    name: str
    subcomponents: list[SubcomponentInstance] = field(default_factory=list)
    connectors: list[Connector] = field(default_factory=list)

    def add_subcomponent(self, name: str, component_type: ComponentType) -> SubcomponentInstance:
        instance = SubcomponentInstance(name=name, realized_by=component_type)
        self.subcomponents.append(instance)
        return instance

    def subcomponent(self, name: str) -> SubcomponentInstance:
        for instance in self.subcomponents:
            if instance.name == name:
                return instance
        raise KeyError(f"Composite {self.name!r} has no subcomponent named {name!r}")

    def unresolved_connectors(self) -> list[Connector]:
        """Connectors that are missing an endpoint or reference no instance."""
        return [c for c in self.connectors if not c.is_resolved]

    def __repr__(self) -> str:
        return (
            f"CompositeStructure({self.name!r}, "
            f"{len(self.subcomponents)} subcomponents, {len(self.connectors)} connectors)"
        )
