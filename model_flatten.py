"""
model_flatten.py
Flattens interfaces for serialization: the field list of an interface is its own
fields followed by the fields of every interface it extends, recursively.
"""
from typing import List, Optional, Sequence, Set

from dependency_sort import CyclicDependency
from spec_model import Interface


def interface_properties(interface: Interface, interfaces: Sequence[Interface],
                         _visiting: Optional[Set[str]] = None) -> List[str]:
    """
    Ordered field names of ``interface``: its own property names (markers stripped),
    then, for each extends entry in declaration order, the flattened list of that base.
    Bases missing from ``interfaces`` are skipped. Nested child interfaces are not fields.
    Duplicated names coming from several bases are kept as is.
    """
    visiting = set() if _visiting is None else _visiting
    if interface.name in visiting:
        raise CyclicDependency(sorted(visiting | {interface.name}))
    visiting.add(interface.name)

    properties = [prop.field_name for prop in interface.properties]
    for extend in interface.extends:
        base = next((i for i in interfaces if i.name == extend), None)
        if base is not None:
            properties.extend(interface_properties(base, interfaces, visiting))

    visiting.discard(interface.name)
    return properties
