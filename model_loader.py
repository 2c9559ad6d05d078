# model_loader.py
# Reads an entity model document (JSON) into a SpecModel for the generators.
import json
from typing import Any, Dict, List

from spec_model import (
    Enumeration,
    EnumerationValue,
    Interface,
    Notification,
    Property,
    PropertyAlternative,
    Request,
    SpecModel,
    TypeAlias,
)
from type_expression import collect_dependencies


class ModelLoadError(Exception):
    pass


# Convenience function to load a model file and return a SpecModel

def load_model_file(model_file_path: str) -> SpecModel:
    with open(model_file_path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ModelLoadError(f"Model file '{model_file_path}' is not valid JSON: {e}") from e
    return build_model(data)


def _require(entry: Dict[str, Any], key: str, kind: str) -> Any:
    if key not in entry:
        raise ModelLoadError(f"{kind} entry is missing '{key}': {entry!r}")
    return entry[key]


def _build_enumeration(entry: Dict[str, Any]) -> Enumeration:
    name = _require(entry, 'name', 'Enumeration')
    is_string = entry.get('isString', entry.get('type') == 'string')
    values = [
        EnumerationValue(
            name=_require(value, 'name', f"Enumeration '{name}' value"),
            value=_require(value, 'value', f"Enumeration '{name}' value"),
            documentation=value.get('documentation'),
        )
        for value in entry.get('values', [])
    ]
    return Enumeration(name, values, is_string=bool(is_string), documentation=entry.get('documentation'))


def _build_type_alias(entry: Dict[str, Any]) -> TypeAlias:
    name = _require(entry, 'name', 'Type alias')
    type_text = _require(entry, 'type', f"Type alias '{name}'")
    dependencies = entry.get('dependencies')
    if dependencies is None:
        dependencies = collect_dependencies([type_text])
    return TypeAlias(name, type_text, documentation=entry.get('documentation'), dependencies=dependencies,
                     deprecated=entry.get('deprecated'), since=entry.get('since'))


def _build_property(entry: Dict[str, Any], owner: str) -> Property:
    name = _require(entry, 'name', f"Interface '{owner}' property")
    alternatives = [
        PropertyAlternative(_require(a, 'type', f"Property '{owner}.{name}' alternative"),
                            deprecated=a.get('deprecated'), since=a.get('since'))
        for a in entry.get('alternatives', [])
    ]
    type_text = entry.get('type')
    if type_text is None:
        if not alternatives:
            raise ModelLoadError(f"Property '{owner}.{name}' has neither 'type' nor 'alternatives'")
        type_text = ' | '.join(a.type for a in alternatives)
    return Property(name, type_text, documentation=entry.get('documentation'), alternatives=alternatives)


def _interface_expressions(interface: Interface) -> List[str]:
    expressions = []
    for prop in interface.properties:
        if prop.type != interface.struct_name:
            expressions.append(prop.type)
    for child in interface.children:
        expressions.extend(_interface_expressions(child))
    return expressions


def _child_names(interface: Interface) -> List[str]:
    names = []
    for child in interface.children:
        names.append(child.struct_name)
        names.extend(_child_names(child))
    return names


def _build_interface(entry: Dict[str, Any]) -> Interface:
    name = _require(entry, 'name', 'Interface')
    interface = Interface(
        name,
        properties=[_build_property(p, name) for p in entry.get('properties', [])],
        extends=list(entry.get('extends', [])),
        children=[_build_interface(c) for c in entry.get('children', [])],
        documentation=entry.get('documentation'),
        deprecated=entry.get('deprecated'),
        since=entry.get('since'),
    )
    dependencies = entry.get('dependencies')
    if dependencies is None:
        dependencies = list(interface.extends) + collect_dependencies(_interface_expressions(interface))
    # Nested structures are declared inside the interface itself
    local_names = {name} | set(_child_names(interface))
    interface.dependencies = [d for d in dict.fromkeys(dependencies) if d not in local_names]
    return interface


def build_model(data: Dict[str, Any]) -> SpecModel:
    """Build a SpecModel from an already decoded entity model document."""
    if not isinstance(data, dict):
        raise ModelLoadError("Model document root must be an object")
    return SpecModel(
        enumerations=[_build_enumeration(e) for e in data.get('enumerations', [])],
        types=[_build_type_alias(t) for t in data.get('typeAliases', [])],
        interfaces=[_build_interface(i) for i in data.get('interfaces', [])],
        requests=[
            Request(_require(r, 'method', 'Request'), r.get('params'), r.get('result'), r.get('error'))
            for r in data.get('requests', [])
        ],
        notifications=[
            Notification(_require(n, 'method', 'Notification'), n.get('params'))
            for n in data.get('notifications', [])
        ],
    )
