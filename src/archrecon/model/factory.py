"""Factory interface for the model objects the connector builder creates.

The builder never instantiates Connector or SubcomponentEndpoint itself; it
calls into a StructureFactory so that another model runtime can be plugged in.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from archrecon.model.structure import Connector, SubcomponentEndpoint


class StructureFactory(ABC):
    """Creates empty connector-side model objects."""

    @abstractmethod
    def create_connector(self) -> Connector:
        """Return a new connector with no endpoints and empty documentation."""

    @abstractmethod
    def create_subcomponent_endpoint(self) -> SubcomponentEndpoint:
        """Return a new, unresolved endpoint."""


class DefaultStructureFactory(StructureFactory):
    """Creates the plain dataclasses from ``archrecon.model.structure``."""

    def create_connector(self) -> Connector:
        return Connector()

    def create_subcomponent_endpoint(self) -> SubcomponentEndpoint:
        return SubcomponentEndpoint()
