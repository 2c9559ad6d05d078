"""
type_expression.py
Parses the raw type expressions carried by type aliases and properties
(e.g. "TextEdit | AnnotatedTextEdit", "'create'", "Range[]",
"{ [uri: DocumentUri]: TextEdit[] }") into TypeExpression trees.
"""
from enum import Enum
from typing import List, Optional

from lark import Lark, Transformer, v_args
from lark.exceptions import LarkError


grammar = r"""
    ?start: type_expr

    ?type_expr: alternative
        | alternative ("|" alternative)+                      -> or_type

    ?alternative: primary
        | alternative "[" "]"                                 -> array_type

    ?primary: STRING_LITERAL                                  -> string_literal
        | NAME                                                -> reference
        | "{" "[" NAME ":" type_expr "]" ":" type_expr "}"    -> map_type
        | "[" type_expr ("," type_expr)* "]"                  -> tuple_type
        | "(" type_expr ")"

    STRING_LITERAL: /'[^']*'/ | /"[^"]*"/
    NAME: /[A-Za-z_$][A-Za-z0-9_$]*(::[A-Za-z_$][A-Za-z0-9_$]*)*/

    %import common.WS
    %ignore WS
"""

parser = Lark(grammar, start='start', parser='lalr')


# Names understood natively by the generated code; never dependencies
BASE_TYPES = {
    "string", "integer", "uinteger", "decimal", "boolean", "null",
    "LSPAny", "LSPObject",
}


class TypeExpressionError(ValueError):
    pass


class TypeKind(Enum):
    BASE = "base"
    REFERENCE = "reference"
    STRING_LITERAL = "string_literal"
    OR = "or"
    ARRAY = "array"
    MAP = "map"
    TUPLE = "tuple"
    # Text matching none of the shapes above, rendered as written
    VERBATIM = "verbatim"


class TypeExpression:
    """
    Node of a parsed type expression. ``value`` holds the type name for base
    types and references, and the unquoted text for string literals.
    """
    def __init__(self, kind: TypeKind, value: Optional[str] = None, items: Optional[List['TypeExpression']] = None):
        self.kind = kind
        self.value = value
        self.items = items or []

    def references(self) -> List[str]:
        """Referenced (non base) type names, in first-seen order."""
        names = []
        if self.kind == TypeKind.REFERENCE:
            names.append(self.value)
        for item in self.items:
            for name in item.references():
                if name not in names:
                    names.append(name)
        return names

    def __eq__(self, other):
        if not isinstance(other, TypeExpression):
            return NotImplemented
        return (self.kind, self.value, self.items) == (other.kind, other.value, other.items)

    def __repr__(self):
        if self.items:
            return f"TypeExpression({self.kind.value}, {self.items!r})"
        return f"TypeExpression({self.kind.value}, {self.value!r})"


@v_args(inline=True)
class TypeExpressionBuilder(Transformer):
    def string_literal(self, token):
        return TypeExpression(TypeKind.STRING_LITERAL, str(token)[1:-1])

    def reference(self, token):
        name = str(token)
        kind = TypeKind.BASE if name in BASE_TYPES else TypeKind.REFERENCE
        return TypeExpression(kind, name)

    def array_type(self, element):
        return TypeExpression(TypeKind.ARRAY, items=[element])

    def map_type(self, key_name, key, value):
        return TypeExpression(TypeKind.MAP, items=[key, value])

    def or_type(self, *alternatives):
        return TypeExpression(TypeKind.OR, items=list(alternatives))

    def tuple_type(self, *items):
        return TypeExpression(TypeKind.TUPLE, items=list(items))


def parse_type_expression(text: str) -> TypeExpression:
    """
    Parse a raw type expression.
    Raises TypeExpressionError if the expression is not well formed.
    """
    try:
        tree = parser.parse(text)
    except LarkError as e:
        raise TypeExpressionError(f"Invalid type expression {text!r}: {e}") from e
    return TypeExpressionBuilder().transform(tree)


def parse_or_verbatim(text: str) -> TypeExpression:
    """Parse a raw type expression, keeping unrecognized text as a VERBATIM node."""
    try:
        return parse_type_expression(text)
    except TypeExpressionError:
        return TypeExpression(TypeKind.VERBATIM, text.strip())


def collect_dependencies(expressions: List[str]) -> List[str]:
    """
    Referenced type names of several raw expressions, in first-seen order.
    Unrecognized expressions reference nothing.
    """
    names = []
    for text in expressions:
        for name in parse_or_verbatim(text).references():
            if name not in names:
                names.append(name)
    return names
