"""Finds the subcomponent instance realizing a component type in a composite.

Assumes at most one instance per component type per composite structure.
A second match raises StructuralInvariantViolation; no match returns an
absent InstanceLookup and emits a WARNING diagnostic.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from archrecon.diagnostics import Diagnostics
from archrecon.model.structure import ComponentType, CompositeStructure, SubcomponentInstance


class StructuralInvariantViolation(ValueError):
    """Raised when several subcomponent instances realize the same type.

    Signals a malformed input model; the construction call must be aborted.
    """


class InstanceNotFoundError(LookupError):
    """Raised by InstanceLookup.unwrap() when no instance was found."""


@dataclass(frozen=True)
class InstanceLookup:
    """Result of resolving a component type inside a composite.

    ``instance`` is None when the composite has no instance of the type.
    """

    composite: CompositeStructure
    component_type: ComponentType
    instance: SubcomponentInstance | None = None

    @property
    def found(self) -> bool:
        return self.instance is not None

    def unwrap(self) -> SubcomponentInstance:
        if self.instance is None:
            raise InstanceNotFoundError(
                f"No subcomponent instance of {self.component_type.name!r} "
                f"in composite {self.composite.name!r}"
            )
        return self.instance

    def __bool__(self) -> bool:
        return self.found


def resolve_instance(
    composite: CompositeStructure,
    component_type: ComponentType,
    diagnostics: Diagnostics | None = None,
) -> InstanceLookup:
    """Return the single direct subcomponent of ``composite`` realizing ``component_type``.

    Args:
        composite: Composite whose direct subcomponents are scanned.
        component_type: Type to match (by identity).
        diagnostics: Sink for the not-found warning; None drops it.

    Returns:
        An InstanceLookup, absent when nothing matched.

    Raises:
        StructuralInvariantViolation: If more than one instance matches.
    """
    matches = [
        instance
        for instance in composite.subcomponents
        if instance.realized_by is component_type
    ]

    if len(matches) > 1:
        raise StructuralInvariantViolation(
            "Assumption on input model does not hold. Only one instance per "
            "component type per composite structure assumed! "
            f"Composite {composite.name!r} has {len(matches)} instances of "
            f"{component_type.name!r}: {[m.name for m in matches]}"
        )

    if not matches:
        if diagnostics is not None:
            diagnostics.emit(
                logging.WARNING,
                f"No subcomponent instance found for parent {composite.name} "
                f"and child component {component_type.name}",
                composite=composite.name,
                component_type=component_type.name,
            )
        return InstanceLookup(composite=composite, component_type=component_type)

    return InstanceLookup(composite=composite, component_type=component_type, instance=matches[0])
