"""
spec_model.py
Entity model consumed by the generators: enumerations, type aliases, interfaces,
properties and the request/notification descriptors of a protocol specification.
"""
from enum import Enum
from typing import List, Optional, Iterable

from type_expression import TypeKind, parse_or_verbatim


def unique_names(names: Optional[Iterable[str]]) -> List[str]:
    """Return the names in first-seen order without duplicates."""
    result = []
    for name in names or []:
        if name not in result:
            result.append(name)
    return result


class PropertyKind(Enum):
    PLAIN = "plain"
    SELF_REFERENCE = "self_reference"
    STRING_LITERAL = "string_literal"
    OR = "or"


class EnumerationValue:
    def __init__(self, name: str, value: str, documentation: Optional[str] = None):
        self.name = name
        self.value = str(value)
        self.documentation = documentation or ""

    def __repr__(self):
        return f"EnumerationValue(name={self.name!r}, value={self.value!r})"


class Enumeration:
    def __init__(self, name: str, values: List[EnumerationValue], is_string: bool = False, documentation: Optional[str] = None):
        self.name = name
        self.values = values
        self.is_string = is_string
        self.documentation = documentation or ""

    def __repr__(self):
        return f"Enumeration(name={self.name!r}, is_string={self.is_string!r}, values={len(self.values)})"


class SpecType:
    """
    Common capabilities of the nodes that take part in dependency ordering:
    a name, a list of dependency names, documentation and version metadata.
    """
    def __init__(self, name: str, documentation: Optional[str] = None, dependencies: Optional[Iterable[str]] = None,
                 deprecated: Optional[str] = None, since: Optional[str] = None):
        self.name = name
        self.documentation = documentation or ""
        self.dependencies = unique_names(dependencies)
        self.deprecated = deprecated
        self.since = since

    def is_interface(self) -> bool:
        return False

    def is_deprecated(self) -> bool:
        return self.deprecated is not None

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, dependencies={self.dependencies!r})"


class TypeAlias(SpecType):
    def __init__(self, name: str, type: str, documentation: Optional[str] = None, dependencies: Optional[Iterable[str]] = None,
                 deprecated: Optional[str] = None, since: Optional[str] = None):
        super().__init__(name, documentation, dependencies, deprecated, since)
        self.type = type


class PropertyAlternative:
    """Metadata of one alternative of a union-typed property."""
    def __init__(self, type: str, deprecated: Optional[str] = None, since: Optional[str] = None):
        self.type = type
        self.deprecated = deprecated
        self.since = since

    def is_deprecated(self) -> bool:
        return self.deprecated is not None

    def __repr__(self):
        return f"PropertyAlternative(type={self.type!r}, deprecated={self.deprecated!r}, since={self.since!r})"


class Property:
    def __init__(self, name: str, type: str, documentation: Optional[str] = None,
                 alternatives: Optional[List[PropertyAlternative]] = None):
        self.name = name
        self.type = type
        self.documentation = documentation or ""
        self.alternatives = alternatives or []
        # Filled in by the property materializer
        self.rendered_type: Optional[str] = None

    @property
    def is_optional(self) -> bool:
        return '?' in self.name

    @property
    def field_name(self) -> str:
        """The property name without the optionality marker or readonly prefix."""
        return self.name.replace('readonly ', '').replace('?', '')

    def kind(self, interface_name: str) -> PropertyKind:
        if self.type == interface_name:
            return PropertyKind.SELF_REFERENCE
        if self.alternatives:
            return PropertyKind.OR
        expression = parse_or_verbatim(self.type)
        if expression.kind == TypeKind.STRING_LITERAL:
            return PropertyKind.STRING_LITERAL
        if expression.kind == TypeKind.OR:
            return PropertyKind.OR
        return PropertyKind.PLAIN

    def __repr__(self):
        return f"Property(name={self.name!r}, type={self.type!r})"


class Interface(SpecType):
    def __init__(self, name: str, properties: Optional[List[Property]] = None, extends: Optional[List[str]] = None,
                 children: Optional[List['Interface']] = None, documentation: Optional[str] = None,
                 dependencies: Optional[Iterable[str]] = None, deprecated: Optional[str] = None, since: Optional[str] = None):
        super().__init__(name, documentation, dependencies, deprecated, since)
        self.properties = properties or []
        self.extends = extends or []
        self.children = children or []

    def is_interface(self) -> bool:
        return True

    @property
    def struct_name(self) -> str:
        """Nested children are named after optional properties; drop the marker."""
        return self.name.replace('?', '')


class Notification:
    def __init__(self, method: str, params: Optional[str] = None):
        self.method = method
        self.params = params

    def __repr__(self):
        return f"Notification(method={self.method!r})"


class Request:
    def __init__(self, method: str, params: Optional[str] = None, result: Optional[str] = None, error: Optional[str] = None):
        self.method = method
        self.params = params
        self.result = result
        self.error = error

    def __repr__(self):
        return f"Request(method={self.method!r})"


class SpecModel:
    def __init__(self, enumerations: Optional[List[Enumeration]] = None, types: Optional[List[TypeAlias]] = None,
                 interfaces: Optional[List[Interface]] = None, requests: Optional[List[Request]] = None,
                 notifications: Optional[List[Notification]] = None):
        self.enumerations = enumerations or []
        self.types = types or []
        self.interfaces = interfaces or []
        self.requests = requests or []
        self.notifications = notifications or []

    def root_types(self) -> List[SpecType]:
        """Type aliases followed by interfaces: the nodes that take part in ordering."""
        return list(self.types) + list(self.interfaces)

    def find_type(self, name: str) -> Optional[SpecType]:
        for node in self.root_types():
            if node.name == name:
                return node
        return None

    def find_interface(self, name: str) -> Optional[Interface]:
        for interface in self.interfaces:
            if interface.name == name:
                return interface
        return None
