"""Turn validated component specs into Component instances."""

from __future__ import annotations

from pathlib import Path
from typing import List

from . import bem, bemx
from .component import Component
from .io_utils import PathLike, read_yaml
from .models import ComponentSpec, ComponentsFile


def build_component(spec: ComponentSpec) -> Component:
    """Build a Component from ``spec``.

    Fields are applied in a fixed order (id, attributes, classes, bem, bemx,
    data, aria, contents) so class tokens always appear in the same order.
    Component and BEM errors propagate unchanged.
    """

    component = Component(spec.tag, spec.closed)
    if spec.id is not None:
        component.set_id(spec.id)
    if spec.attributes:
        component.add_attributes(spec.attributes)
    for class_name in spec.classes:
        component.add_class(class_name)
    if spec.bem is not None:
        component.add_class(bem.generate(spec.bem.block, spec.bem.element, spec.bem.modifiers))
    if spec.bemx is not None:
        component.add_class(
            bemx.generate(
                spec.bemx.block,
                spec.bemx.parent,
                spec.bemx.modifiers,
                spec.bemx.parent_modifiers,
            )
        )
    for name, value in spec.data.items():
        component.set_data(name, value)
    for name, value in spec.aria.items():
        component.set_aria(name, value)
    component.add_contents(spec.contents)
    return component


def build_components(specs: List[ComponentSpec]) -> List[Component]:
    return [build_component(spec) for spec in specs]


def load_components_file(path: PathLike) -> ComponentsFile:
    """Read and validate a components file.

    The document is either a list of components or a mapping with a
    ``components`` list and an optional ``page`` block.

    Raises:
        pydantic.ValidationError: the document does not match the schema.
    """

    payload = read_yaml(Path(path))
    if payload is None:
        payload = {}
    if isinstance(payload, list):
        payload = {"components": payload}
    return ComponentsFile.model_validate(payload)


__all__ = ["build_component", "build_components", "load_components_file"]
