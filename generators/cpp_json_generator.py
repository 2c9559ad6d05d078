"""
C++ serialization bindings generator (types_json.h).
Every string enumeration gets an enumerator <-> wire literal table and every interface
(nested children included) a binding listing its flattened fields.
"""
from typing import List, Optional

from generators.cpp_generator import CppGeneratorBase
from model_flatten import interface_properties
from spec_model import Enumeration, Interface

# Shapes that a flat field list cannot describe (self-referential ranges, free-form
# option bags); they only get a forward declaration and a hand-written binding.
FORWARD_ONLY_NAMES = {"SelectionRange", "FormattingOptions", "ChangeAnnotationsType"}


class CppJsonGenerator(CppGeneratorBase):
    filename = "types_json.h"
    includes = ['"json.h"', '"types.h"']

    def generate_declarations(self) -> str:
        text = ''.join(self.write_json_enum(e) for e in self.model.enumerations if e.is_string)
        for interface in self.model.interfaces:
            text += self.write_json_interface(interface)
        return text

    def write_json_enum(self, enumeration: Enumeration) -> str:
        content = ""
        for value in enumeration.values:
            content += f"    {{{enumeration.name}::{value.name}, \"{value.value}\"}},\n"
        return f"\nJSONIFY_ENUM( {enumeration.name}, {{\n{content}}})\n"

    def write_json_interface(self, interface: Interface, parent: Optional[List[str]] = None) -> str:
        parent = (parent or []) + [interface.struct_name]
        scoped_name = '::'.join(parent)
        if interface.struct_name in FORWARD_ONLY_NAMES:
            return f"\nJSONIFY_FWD({scoped_name})\n"

        result = "\n" if len(parent) == 1 else ""
        for child in interface.children:
            result += self.write_json_interface(child, parent)

        properties = interface_properties(interface, self.model.interfaces)
        if properties:
            result += f"JSONIFY({scoped_name}, {', '.join(properties)})\n"
        else:
            result += f"JSONIFY_EMPTY({scoped_name})\n"
        return result
