"""ConfigLoader: typed YAML configuration loading with Pydantic v2 validation.

Relative paths are resolved against PROJECT_ROOT (repo root), never against
the current working directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

# PROJECT_ROOT: three parents up from this file:
#   src/archrecon/utils/config.py → src/archrecon/utils → src/archrecon → src → PROJECT_ROOT
PROJECT_ROOT = Path(__file__).parents[3]


# ---------------------------------------------------------------------------
# Exception
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Raised for missing files, invalid YAML, or Pydantic validation failures."""


# ---------------------------------------------------------------------------
# Builder configuration
# ---------------------------------------------------------------------------

DEFAULT_DOCUMENTATION_TEMPLATE = "Assembly Connector from {required} to {provided}"


class BuilderConfig(BaseModel):
    """Settings for AssemblyConnectorBuilder (builder.yaml).

    strict_resolution=False keeps the tolerant behaviour: a type without a
    matching subcomponent instance yields an unresolved endpoint plus a
    warning. True turns that case into UnresolvedEndpointError.
    """

    documentation_template: str = DEFAULT_DOCUMENTATION_TEMPLATE
    strict_resolution: bool = False
    log_level: str = "DEBUG"
    logger_name: str = "archrecon.builder"

    @field_validator("documentation_template")
    @classmethod
    def template_must_name_both_sides(cls, v: str) -> str:
        for placeholder in ("{required}", "{provided}"):
            if placeholder not in v:
                raise ValueError(f"documentation_template must contain {placeholder}")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {v!r}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


# ---------------------------------------------------------------------------
# Structural model description
# ---------------------------------------------------------------------------


class ComponentTypeConfig(BaseModel):
    """Ports exposed by one component type."""

    required_ports: list[str] = Field(default_factory=list)
    provided_ports: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def port_names_unique(self) -> "ComponentTypeConfig":
        names = self.required_ports + self.provided_ports
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate port names: {duplicates}")
        return self


class CompositeConfig(BaseModel):
    """One composite structure: instance name → component type name, plus wiring."""

    subcomponents: dict[str, str] = Field(default_factory=dict)
    # Wiring entries, "consumer.port -> provider.port"; parsed by archrecon.builder.wiring
    connectors: list[str] = Field(default_factory=list)


class ModelConfig(BaseModel):
    """Full structural model description (model/*.yaml)."""

    component_types: dict[str, ComponentTypeConfig]
    composites: dict[str, CompositeConfig] = Field(default_factory=dict)

    @model_validator(mode="after")
    def subcomponent_types_declared(self) -> "ModelConfig":
        for composite_name, composite in self.composites.items():
            for instance_name, type_name in composite.subcomponents.items():
                if type_name not in self.component_types:
                    raise ValueError(
                        f"Subcomponent {composite_name}.{instance_name} realizes "
                        f"undeclared component type {type_name!r}"
                    )
        return self


# ---------------------------------------------------------------------------
# ConfigLoader
# ---------------------------------------------------------------------------


class ConfigLoader:
    """Loads and validates YAML configuration files for archrecon.

    Usage::

        loader = ConfigLoader()
        builder_cfg = loader.load_builder_config("configs/builder.yaml")
        model_cfg = loader.load_model_config("configs/model/webshop.yaml")
    """

    def load(self, path: str | Path) -> dict[str, Any]:
        """Load a YAML file and return it as a plain dict.

        Raises:
            ConfigError: if the file does not exist, is not valid YAML, or is empty.
        """
        resolved = self._resolve(path)
        if not resolved.exists():
            raise ConfigError(f"Config file not found: {resolved}")
        try:
            with resolved.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ConfigError(f"YAML parse error in {resolved}: {exc}") from exc
        if data is None:
            raise ConfigError(f"Config file is empty: {resolved}")
        if not isinstance(data, dict):
            raise ConfigError(
                f"Expected a YAML mapping at top level in {resolved}, got {type(data).__name__}"
            )
        return data

    def load_builder_config(self, path: str | Path) -> BuilderConfig:
        """Load and validate builder.yaml → BuilderConfig.

        Raises:
            ConfigError: on file/parse/validation failure.
        """
        data = self.load(path)
        return self._parse(BuilderConfig, data, path)

    def load_model_config(self, path: str | Path) -> ModelConfig:
        """Load and validate a structural model description → ModelConfig.

        Raises:
            ConfigError: on file/parse/validation failure.
        """
        data = self.load(path)
        return self._parse(ModelConfig, data, path)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve(path: str | Path) -> Path:
        """Resolve path: absolute paths used as-is; relative paths → PROJECT_ROOT."""
        p = Path(path)
        if p.is_absolute():
            return p
        return PROJECT_ROOT / p

    @staticmethod
    def _parse(model_cls: type[BaseModel], data: dict[str, Any], path: str | Path) -> Any:
        """Instantiate a Pydantic model, wrapping ValidationError as ConfigError."""
        from pydantic import ValidationError

        try:
            return model_cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(
                f"Validation failed for {path}:\n{exc}"
            ) from exc
