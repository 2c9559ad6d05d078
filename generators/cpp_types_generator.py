"""
C++ declarations generator (types.h).
Emits enumerations first, then type aliases and interfaces in dependency order.
"""
from typing import List

from dependency_sort import iter_dependency_batches
from generators.cpp_generator import CppGeneratorBase
from generators.generator_utils import INDENT, format_documentation
from generators.property_materializer import PropertyMaterializer
from spec_model import Enumeration, Interface, SpecType, TypeAlias

# Provided natively by the target representation
SUPPRESSED_TYPE_NAMES = {"integer", "uinteger", "decimal"}


class CppTypesGenerator(CppGeneratorBase):
    filename = "types.h"
    includes = [
        "<nlohmann/json.hpp>",
        "",
        "<memory>",
        "<optional>",
        "<string>",
        "<tuple>",
        "<unordered_map>",
        "<variant>",
        "<vector>",
    ]

    def __init__(self, model, options=None):
        super().__init__(model, options)
        self.materializer = PropertyMaterializer(model.root_types())
        # Names in emission order, filled by generate_declarations
        self.emitted_names: List[str] = []

    def generate_declarations(self) -> str:
        self.emitted_names = []
        text = ''.join(self.write_enum(e) for e in self.model.enumerations)
        for batch in iter_dependency_batches(self.model.root_types()):
            for node in batch:
                text += self.write_node(node)
                self.emitted_names.append(node.name)
        return text

    def write_enum(self, enumeration: Enumeration) -> str:
        content = ""
        for value in enumeration.values:
            content += format_documentation(value.documentation, INDENT)
            if enumeration.is_string:
                content += f"{INDENT}{value.name},\n"
            else:
                content += f"{INDENT}{value.name} = {value.value},\n"
        return f"\n{format_documentation(enumeration.documentation)}enum class {enumeration.name} {{\n{content}}};\n"

    def write_node(self, node: SpecType) -> str:
        if node.is_interface():
            return self.write_main_interface(node)
        return self.write_type(node)

    def write_type(self, type_alias: TypeAlias) -> str:
        if type_alias.name in SUPPRESSED_TYPE_NAMES:
            return ""
        rendered = self.materializer.render_type(type_alias.type)
        return f"\n{format_documentation(type_alias.documentation)}using {type_alias.name} = {rendered};\n"

    def _write_content(self, interface: Interface, indent: str) -> str:
        content = ""
        for child in interface.children:
            content += self.write_child_interface(child, indent)
        for prop in interface.properties:
            content += self.materializer.materialize(prop, interface.struct_name, indent)
        return content

    def write_child_interface(self, interface: Interface, indent: str) -> str:
        """Nested anonymous structure, declared inside its parent."""
        content = self._write_content(interface, indent + INDENT)
        return (f"{format_documentation(interface.documentation, indent)}"
                f"{indent}struct {interface.struct_name} {{\n{content}{indent}}};\n")

    def write_main_interface(self, interface: Interface) -> str:
        extends = ""
        if interface.extends:
            extends = " : public " + ", public ".join(interface.extends)
        content = self._write_content(interface, INDENT)
        return f"\n{format_documentation(interface.documentation)}struct {interface.name}{extends} {{\n{content}}};\n"
