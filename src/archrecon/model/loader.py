"""Builds the in-memory structural model from a validated ModelConfig.

Usage:
    model_cfg = ConfigLoader().load_model_config("configs/model/webshop.yaml")
    model = StructureLoader.from_config(model_cfg)
    shop = model.composite("WebShop")

Loading creates types, ports and subcomponents only. Connectors are added
afterwards by the wiring planner (archrecon.builder.wiring).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from archrecon.model.structure import ComponentType, CompositeStructure, PortRole
from archrecon.utils.config import ModelConfig


@dataclass
class ArchitectureModel:
    """Component types and composite structures, keyed by name.

    Attributes:
        component_types: Type name → ComponentType.
        composites: Composite name → CompositeStructure.
        wiring: Composite name → raw wiring entries from the config.
    """

    component_types: dict[str, ComponentType] = field(default_factory=dict)
    composites: dict[str, CompositeStructure] = field(default_factory=dict)
    wiring: dict[str, list[str]] = field(default_factory=dict)

    def component_type(self, name: str) -> ComponentType:
        try:
            return self.component_types[name]
        except KeyError:
            raise KeyError(f"Unknown component type {name!r}") from None

    def composite(self, name: str) -> CompositeStructure:
        try:
            return self.composites[name]
        except KeyError:
            raise KeyError(f"Unknown composite structure {name!r}") from None


class StructureLoader:
    """Creates an ArchitectureModel from config. All methods are static."""

    @staticmethod
    def from_config(config: ModelConfig | dict[str, Any]) -> ArchitectureModel:
        """Build types (required ports first, then provided) and composites.

        Args:
            config: A validated ModelConfig, or a raw dict that is validated here.

        Returns:
            The populated ArchitectureModel.
        """
        if not isinstance(config, ModelConfig):
            config = ModelConfig.model_validate(config)

        model = ArchitectureModel()
        for type_name, type_cfg in config.component_types.items():
            component_type = ComponentType(name=type_name)
            for port_name in type_cfg.required_ports:
                component_type.add_port(port_name, PortRole.REQUIRED)
            for port_name in type_cfg.provided_ports:
                component_type.add_port(port_name, PortRole.PROVIDED)
            model.component_types[type_name] = component_type

        for composite_name, composite_cfg in config.composites.items():
            composite = CompositeStructure(name=composite_name)
            for instance_name, type_name in composite_cfg.subcomponents.items():
                composite.add_subcomponent(instance_name, model.component_types[type_name])
            model.composites[composite_name] = composite
            model.wiring[composite_name] = list(composite_cfg.connectors)

        return model
