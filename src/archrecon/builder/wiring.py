"""Applies pre-decided wiring entries to a loaded ArchitectureModel.

Entry format (one per connector, requiring side first):
    "cart.payment -> payment.service"

Each side names either a subcomponent instance of the composite or a
component type. Two instances use the instance-based builder; two types go
through instance resolution and may raise StructuralInvariantViolation.

Usage:
    model = StructureLoader.from_config(model_cfg)
    connectors = WiringPlanner(AssemblyConnectorBuilder()).apply(model)
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from archrecon.builder.assembly import AssemblyConnectorBuilder
from archrecon.model.loader import ArchitectureModel
from archrecon.model.structure import (
    ComponentType,
    CompositeStructure,
    Connector,
    Port,
    PortRole,
    SubcomponentInstance,
)


class WiringError(Exception):
    """Raised when a wiring entry is malformed or refers to unknown elements."""


# Matches "a.b -> c.d", optional trailing "# comment"
_ARROW_RE = re.compile(
    r"^\s*(?P<required_side>\w+)\.(?P<required_port>\w+)\s*->\s*"
    r"(?P<provided_side>\w+)\.(?P<provided_port>\w+)\s*(?:#.*)?$"
)


@dataclass(frozen=True)
class WiringEntry:
    required_side: str
    required_port: str
    provided_side: str
    provided_port: str

    def __str__(self) -> str:
        return (
            f"{self.required_side}.{self.required_port} -> "
            f"{self.provided_side}.{self.provided_port}"
        )


def parse_wiring_entry(entry: str) -> WiringEntry:
    """Parse ``"side.port -> side.port"`` into a WiringEntry.

    Raises:
        WiringError: If the entry does not match the arrow format.
    """
    m = _ARROW_RE.match(str(entry))
    if m is None:
        raise WiringError(
            f"Invalid wiring entry {entry!r}. Expected 'side.port -> side.port'."
        )
    return WiringEntry(**m.groupdict())


class WiringPlanner:
    """Turns the wiring entries of each composite into assembly connectors."""

    def __init__(self, builder: AssemblyConnectorBuilder | None = None) -> None:
        self._builder = builder if builder is not None else AssemblyConnectorBuilder()

    def apply(self, model: ArchitectureModel) -> list[Connector]:
        """Wire every composite of ``model`` in declaration order.

        Returns:
            All created connectors, in creation order.
        """
        created: list[Connector] = []
        for composite_name, entries in model.wiring.items():
            composite = model.composite(composite_name)
            for raw in entries:
                created.append(self.apply_entry(model, composite, parse_wiring_entry(raw)))
        return created

    def apply_entry(
        self,
        model: ArchitectureModel,
        composite: CompositeStructure,
        entry: WiringEntry,
    ) -> Connector:
        required = self._lookup_side(model, composite, entry.required_side)
        provided = self._lookup_side(model, composite, entry.provided_side)
        if type(required) is not type(provided):
            raise WiringError(
                f"Wiring entry {str(entry)!r} in {composite.name!r} mixes a "
                f"subcomponent instance with a component type"
            )

        required_port = self._lookup_port(required, entry.required_port, PortRole.REQUIRED, entry)
        provided_port = self._lookup_port(provided, entry.provided_port, PortRole.PROVIDED, entry)
        return self._builder.build_assembly_connector(
            composite, required_port, provided_port, required, provided
        )

    # ── Helpers ───────────────────────────────────────────────────────────────

    @staticmethod
    def _lookup_side(
        model: ArchitectureModel,
        composite: CompositeStructure,
        name: str,
    ) -> SubcomponentInstance | ComponentType:
        # Instance names shadow type names.
        for instance in composite.subcomponents:
            if instance.name == name:
                return instance
        if name in model.component_types:
            return model.component_types[name]
        raise WiringError(
            f"{name!r} is neither a subcomponent of {composite.name!r} "
            f"nor a known component type"
        )

    @staticmethod
    def _lookup_port(
        side: SubcomponentInstance | ComponentType,
        port_name: str,
        role: PortRole,
        entry: WiringEntry,
    ) -> Port:
        component_type = side.realized_by if isinstance(side, SubcomponentInstance) else side
        try:
            port = component_type.port(port_name)
        except KeyError as exc:
            raise WiringError(f"Wiring entry {str(entry)!r}: {exc.args[0]}") from exc
        if port.role is not role:
            raise WiringError(
                f"Wiring entry {str(entry)!r}: port {port.qualified_name!r} is "
                f"{port.role.value}, expected {role.value}"
            )
        return port
