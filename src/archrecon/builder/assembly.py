"""Builder for assembly connectors between subcomponents of a composite.

Usage (component types, instances resolved inside the composite):
    builder = AssemblyConnectorBuilder()
    connector = builder.build_from_types(shop, cart_needs_pay, pay_service, Cart, Payment)

Usage (explicit instances):
    connector = builder.build_from_instances(shop, cart_needs_pay, pay_service, cart, payment)

The new connector is appended to the parent composite before its endpoints
are attached and is never removed again. Endpoint 0 is always the requiring
side, endpoint 1 the providing side.
"""
from __future__ import annotations

import logging

from archrecon.builder.endpoints import EndpointBuilder
from archrecon.diagnostics import Diagnostics, LoggerDiagnostics
from archrecon.model.factory import DefaultStructureFactory, StructureFactory
from archrecon.model.structure import (
    ComponentType,
    CompositeStructure,
    Connector,
    Port,
    SubcomponentInstance,
)
from archrecon.utils.config import BuilderConfig
from archrecon.utils.logging import get_logger


class AssemblyConnectorBuilder:
    """Creates assembly connectors and links them into their parent composite.

    Args:
        factory: Creates Connector and SubcomponentEndpoint objects.
            Defaults to DefaultStructureFactory.
        diagnostics: Receives the DEBUG creation trace and resolver warnings.
            Defaults to a LoggerDiagnostics on ``config.logger_name``.
        config: Documentation template, strict resolution, logging settings.
    """

    def __init__(
        self,
        factory: StructureFactory | None = None,
        diagnostics: Diagnostics | None = None,
        config: BuilderConfig | None = None,
    ) -> None:
        self._config = config if config is not None else BuilderConfig()
        self._factory = factory if factory is not None else DefaultStructureFactory()
        if diagnostics is None:
            logger = get_logger(self._config.logger_name)
            # Loggers are cached by name; the configured level wins over an earlier one.
            logger.set_level(self._config.log_level_value)
            diagnostics = LoggerDiagnostics(logger)
        self._diagnostics = diagnostics
        self._endpoints = EndpointBuilder(
            factory=self._factory,
            diagnostics=self._diagnostics,
            strict=self._config.strict_resolution,
        )

    @property
    def config(self) -> BuilderConfig:
        return self._config

    @property
    def diagnostics(self) -> Diagnostics:
        return self._diagnostics

    # ── Public API ────────────────────────────────────────────────────────────

    def build_from_types(
        self,
        parent: CompositeStructure,
        required_port: Port,
        provided_port: Port,
        required_type: ComponentType,
        provided_type: ComponentType,
    ) -> Connector:
        """Connect the instances of two component types inside ``parent``.

        Args:
            parent: The enclosing composite structure.
            required_port: Required port of the inner requiring component.
            provided_port: Provided port of the inner providing component.
            required_type: Type of the requiring subcomponent.
            provided_type: Type of the providing subcomponent.

        Returns:
            The new connector, already appended to ``parent.connectors``.

        Raises:
            StructuralInvariantViolation: If ``parent`` holds more than one
                instance of either type. The connector stays attached to
                ``parent`` with fewer than two endpoints.
        """
        connector = self._create_connector(parent, required_type.name, provided_type.name)
        self._endpoints.attach_endpoint_for_type(connector, parent, required_type, required_port)
        self._endpoints.attach_endpoint_for_type(connector, parent, provided_type, provided_port)
        return connector

    def build_from_instances(
        self,
        parent: CompositeStructure,
        required_port: Port,
        provided_port: Port,
        required_instance: SubcomponentInstance,
        provided_instance: SubcomponentInstance,
    ) -> Connector:
        """Connect two explicitly given subcomponent instances inside ``parent``.

        No instance lookup happens, so this never raises
        StructuralInvariantViolation.
        """
        connector = self._create_connector(
            parent,
            required_instance.realized_by.name,
            provided_instance.realized_by.name,
        )
        self._endpoints.attach_endpoint(connector, required_instance, required_port)
        self._endpoints.attach_endpoint(connector, provided_instance, provided_port)
        return connector

    def build_assembly_connector(
        self,
        parent: CompositeStructure,
        required_port: Port,
        provided_port: Port,
        required: ComponentType | SubcomponentInstance,
        provided: ComponentType | SubcomponentInstance,
    ) -> Connector:
        """Dispatch to build_from_types or build_from_instances.

        Raises:
            TypeError: If the two sides are not both ComponentTypes or both
                SubcomponentInstances.
        """
        if isinstance(required, ComponentType) and isinstance(provided, ComponentType):
            return self.build_from_types(parent, required_port, provided_port, required, provided)
        if isinstance(required, SubcomponentInstance) and isinstance(provided, SubcomponentInstance):
            return self.build_from_instances(parent, required_port, provided_port, required, provided)
        raise TypeError(
            "build_assembly_connector expects two ComponentTypes or two "
            f"SubcomponentInstances, got {type(required).__name__} and "
            f"{type(provided).__name__}"
        )

    # ── Internals ─────────────────────────────────────────────────────────────

    def _create_connector(
        self,
        parent: CompositeStructure,
        required_name: str,
        provided_name: str,
    ) -> Connector:
        self._diagnostics.emit(
            logging.DEBUG,
            f"Creating new assembly connector from {required_name} to {provided_name}",
            composite=parent.name,
            required=required_name,
            provided=provided_name,
        )
        connector = self._factory.create_connector()
        parent.connectors.append(connector)
        connector.documentation = self._config.documentation_template.format(
            required=required_name,
            provided=provided_name,
        )
        return connector


_default_builder: AssemblyConnectorBuilder | None = None


def build_assembly_connector(
    parent: CompositeStructure,
    required_port: Port,
    provided_port: Port,
    required: ComponentType | SubcomponentInstance,
    provided: ComponentType | SubcomponentInstance,
) -> Connector:
    """Module-level shortcut using a lazily created default builder."""
    global _default_builder
    if _default_builder is None:
        _default_builder = AssemblyConnectorBuilder()
    return _default_builder.build_assembly_connector(
        parent, required_port, provided_port, required, provided
    )
