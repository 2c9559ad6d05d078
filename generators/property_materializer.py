"""
Property materializer for the C++ declarations.
Decides for every interface property whether it becomes a value field, an optional,
an owned pointer (self-reference), a string constant or a std::variant, and renders it.
"""
from typing import Dict, List, Optional, Sequence, Tuple

from generators.generator_utils import format_documentation, parse_version, render_cpp_type
from spec_model import Property, PropertyKind, SpecType
from type_expression import TypeExpression, TypeKind, parse_or_verbatim

# (expression, deprecated, since) of one union alternative
Alternative = Tuple[TypeExpression, bool, Optional[str]]


def fold_literals(documentation: str, literals: Sequence[str]) -> str:
    """Append the accepted literal tags of a string-typed field to its documentation."""
    tags = ', '.join(f'"{literal}"' for literal in literals)
    if documentation.lstrip().startswith(('/*', '//')):
        return f"{documentation.rstrip()}\n// Accepted values: {tags}"
    if documentation.strip():
        return f"{documentation.rstrip()}\n\nAccepted values: {tags}"
    return f"Accepted values: {tags}"


class PropertyMaterializer:
    def __init__(self, root_types: Sequence[SpecType]):
        # Used to resolve references to their deprecation and version metadata
        self.types: Dict[str, SpecType] = {}
        for node in root_types:
            self.types.setdefault(node.name, node)

    def _sort_key(self, alternative: Alternative) -> Tuple[bool, Tuple[int, ...]]:
        expression, deprecated, since = alternative
        if expression.kind == TypeKind.REFERENCE and expression.value in self.types:
            node = self.types[expression.value]
            deprecated, since = node.is_deprecated(), node.since
        return (deprecated, parse_version(since))

    def order_alternatives(self, alternatives: List[Alternative]) -> List[Alternative]:
        """
        Non-deprecated alternatives first, then ascending version of introduction.
        Deserializers pick the first alternative matching the payload.
        """
        keys = [self._sort_key(alternative) for alternative in alternatives]
        order = sorted(range(len(alternatives)), key=lambda index: keys[index])
        return [alternatives[index] for index in order]

    def render_union(self, alternatives: List[Alternative], reorder: bool = True,
                     self_name: Optional[str] = None) -> Tuple[str, List[str]]:
        """
        Render union alternatives as a std::variant.
        String literals collapse into a single std::string alternative and are returned
        so that the caller can document them. An alternative naming ``self_name`` (the
        enclosing struct) is held through a std::unique_ptr. Returns (rendered type, literals).
        """
        if reorder:
            alternatives = self.order_alternatives(alternatives)
        rendered = []
        literals = []
        for expression, _, _ in alternatives:
            if expression.kind == TypeKind.STRING_LITERAL:
                literals.append(expression.value)
            if expression.kind == TypeKind.REFERENCE and expression.value == self_name:
                cpp_type = f"std::unique_ptr<{self_name}>"
            else:
                cpp_type = render_cpp_type(expression)
            if cpp_type not in rendered:
                rendered.append(cpp_type)
        if len(rendered) == 1:
            return rendered[0], literals
        return f"std::variant<{', '.join(rendered)}>", literals

    def render_type(self, type_text: str) -> str:
        """Render a type alias expression; unions keep their declared order."""
        expression = parse_or_verbatim(type_text)
        if expression.kind == TypeKind.OR:
            rendered, _ = self.render_union([(item, False, None) for item in expression.items], reorder=False)
            return rendered
        return render_cpp_type(expression)

    def _alternatives(self, prop: Property, expression: Optional[TypeExpression]) -> List[Alternative]:
        if prop.alternatives:
            return [(parse_or_verbatim(a.type), a.is_deprecated(), a.since) for a in prop.alternatives]
        return [(item, False, None) for item in expression.items]

    def materialize(self, prop: Property, interface_name: str, indent: str = "") -> str:
        """
        Render the declaration of ``prop`` inside the struct ``interface_name``.
        The final C++ type is stored on ``prop.rendered_type``.
        """
        kind = prop.kind(interface_name)
        name = prop.field_name
        documentation = prop.documentation

        if kind == PropertyKind.SELF_REFERENCE:
            prop.rendered_type = f"std::unique_ptr<{prop.type}>"
            return f"{format_documentation(documentation, indent)}{indent}{prop.rendered_type} {name};\n"

        expression = None if prop.alternatives else parse_or_verbatim(prop.type)
        if kind == PropertyKind.STRING_LITERAL and not prop.is_optional:
            prop.rendered_type = 'std::string'
            return (f"{format_documentation(documentation, indent)}"
                    f"{indent}static inline const std::string {name} = \"{expression.value}\";\n")

        if kind == PropertyKind.OR:
            rendered, literals = self.render_union(self._alternatives(prop, expression), self_name=interface_name)
            if literals:
                documentation = fold_literals(documentation, literals)
        elif kind == PropertyKind.STRING_LITERAL:
            rendered = 'std::string'
            documentation = fold_literals(documentation, [expression.value])
        else:
            rendered = render_cpp_type(expression)

        if prop.is_optional:
            rendered = f"std::optional<{rendered}>"
        prop.rendered_type = rendered
        return f"{format_documentation(documentation, indent)}{indent}{rendered} {name};\n"
