"""Tests for EndpointBuilder.

Covers direct attachment, attachment through type resolution, strict mode
and the injected factory.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from archrecon.builder.endpoints import EndpointBuilder, UnresolvedEndpointError
from archrecon.builder.resolver import StructuralInvariantViolation
from archrecon.diagnostics import RecordingDiagnostics
from archrecon.model.factory import DefaultStructureFactory
from archrecon.model.structure import ComponentType, Connector, SubcomponentEndpoint

if TYPE_CHECKING:
    from conftest import Scenario


class CountingFactory(DefaultStructureFactory):
    def __init__(self) -> None:
        self.endpoints_created = 0

    def create_subcomponent_endpoint(self) -> SubcomponentEndpoint:
        self.endpoints_created += 1
        return super().create_subcomponent_endpoint()


class TestAttachEndpoint:
    def test_appends_in_call_order(self, scenario: Scenario) -> None:
        builder = EndpointBuilder()
        connector = Connector()
        first = builder.attach_endpoint(connector, scenario.i1, scenario.port_a)
        second = builder.attach_endpoint(connector, scenario.i2, scenario.port_b)
        assert connector.endpoints == [first, second]
        assert (first.subcomponent, first.port) == (scenario.i1, scenario.port_a)
        assert (second.subcomponent, second.port) == (scenario.i2, scenario.port_b)

    def test_port_is_optional(self, scenario: Scenario) -> None:
        endpoint = EndpointBuilder().attach_endpoint(Connector(), scenario.i1)
        assert endpoint.port is None
        assert endpoint.is_resolved

    def test_missing_instance_still_attaches(self, scenario: Scenario) -> None:
        connector = Connector()
        endpoint = EndpointBuilder().attach_endpoint(connector, None, scenario.port_a)
        assert connector.endpoints == [endpoint]
        assert not endpoint.is_resolved
        assert endpoint.port is scenario.port_a

    def test_uses_injected_factory(self, scenario: Scenario) -> None:
        factory = CountingFactory()
        EndpointBuilder(factory=factory).attach_endpoint(Connector(), scenario.i1)
        assert factory.endpoints_created == 1


class TestAttachEndpointForType:
    def test_resolves_instance(self, scenario: Scenario) -> None:
        connector = Connector()
        endpoint = EndpointBuilder().attach_endpoint_for_type(
            connector, scenario.composite, scenario.type_b, scenario.port_b
        )
        assert endpoint.subcomponent is scenario.i2
        assert endpoint.port is scenario.port_b

    def test_not_found_attaches_unresolved_and_warns(self, scenario: Scenario, recorder: RecordingDiagnostics) -> None:
        connector = Connector()
        endpoint = EndpointBuilder(diagnostics=recorder).attach_endpoint_for_type(
            connector, scenario.composite, ComponentType("Ghost")
        )
        assert connector.endpoints == [endpoint]
        assert endpoint.subcomponent is None
        assert len(recorder.warnings) == 1

    def test_strict_mode_raises_on_not_found(self, scenario: Scenario) -> None:
        connector = Connector()
        with pytest.raises(UnresolvedEndpointError, match="Ghost"):
            EndpointBuilder(strict=True).attach_endpoint_for_type(
                connector, scenario.composite, ComponentType("Ghost")
            )
        assert connector.endpoints == []

    def test_violation_attaches_nothing(self, scenario: Scenario) -> None:
        scenario.composite.add_subcomponent("i3", scenario.type_a)
        connector = Connector()
        with pytest.raises(StructuralInvariantViolation):
            EndpointBuilder().attach_endpoint_for_type(
                connector, scenario.composite, scenario.type_a, scenario.port_a
            )
        assert connector.endpoints == []
