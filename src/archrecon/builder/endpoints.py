"""Creates subcomponent endpoints and attaches them to a connector."""
from __future__ import annotations

from archrecon.builder.resolver import resolve_instance
from archrecon.diagnostics import Diagnostics
from archrecon.model.factory import DefaultStructureFactory, StructureFactory
from archrecon.model.structure import (
    ComponentType,
    CompositeStructure,
    Connector,
    Port,
    SubcomponentEndpoint,
    SubcomponentInstance,
)


class UnresolvedEndpointError(ValueError):
    """Raised in strict mode when an endpoint's instance cannot be resolved."""


class EndpointBuilder:
    """Appends endpoints to connectors, in call order.

    Args:
        factory: Creates the endpoint objects.
        diagnostics: Receives resolver warnings.
        strict: Raise UnresolvedEndpointError instead of attaching an
            endpoint without a subcomponent.
    """

    def __init__(
        self,
        factory: StructureFactory | None = None,
        diagnostics: Diagnostics | None = None,
        strict: bool = False,
    ) -> None:
        self._factory = factory if factory is not None else DefaultStructureFactory()
        self._diagnostics = diagnostics
        self._strict = strict

    def attach_endpoint(
        self,
        connector: Connector,
        instance: SubcomponentInstance | None,
        port: Port | None = None,
    ) -> SubcomponentEndpoint:
        """Create an endpoint for ``instance`` and append it to ``connector``.

        ``instance`` may be None; the endpoint is still attached, unresolved.
        """
        endpoint = self._factory.create_subcomponent_endpoint()
        endpoint.subcomponent = instance
        connector.endpoints.append(endpoint)
        if port is not None:
            endpoint.port = port
        return endpoint

    def attach_endpoint_for_type(
        self,
        connector: Connector,
        composite: CompositeStructure,
        component_type: ComponentType,
        port: Port | None = None,
    ) -> SubcomponentEndpoint:
        """Resolve the instance of ``component_type`` in ``composite``, then attach it.

        Raises:
            StructuralInvariantViolation: If the composite holds several
                instances of the type (nothing is attached).
            UnresolvedEndpointError: In strict mode, if it holds none.
        """
        lookup = resolve_instance(composite, component_type, self._diagnostics)
        if self._strict and not lookup.found:
            raise UnresolvedEndpointError(
                f"Cannot attach endpoint: composite {composite.name!r} has no "
                f"instance of {component_type.name!r}"
            )
        return self.attach_endpoint(connector, lookup.instance, port)
