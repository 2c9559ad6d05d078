"""
Shared utilities for the C++ code generators.
Handles the generated-file banner, documentation comments, type mapping and
method name derivation.
"""
from typing import Iterable, Optional, Tuple

from type_expression import TypeExpression, TypeKind

GENERATED_BANNER = (
    "// File generated by spec2cpp tool\n"
    "// DO NOT MAKE ANY CHANGES HERE\n"
)

INDENT = "    "

# --- Type Mapping ---
SPEC_TO_CPP_TYPE = {
    'string': 'std::string',
    'integer': 'int',
    'uinteger': 'unsigned int',
    'decimal': 'double',
    'boolean': 'bool',
    'null': 'std::nullptr_t',
    'LSPAny': 'nlohmann::json',
    'LSPObject': 'nlohmann::json',
}

NULL_TYPE = 'std::nullptr_t'


def render_cpp_type(expression: TypeExpression) -> str:
    """Map a parsed type expression to a C++ type string."""
    kind = expression.kind
    if kind == TypeKind.BASE:
        return SPEC_TO_CPP_TYPE.get(expression.value, expression.value)
    if kind in (TypeKind.REFERENCE, TypeKind.VERBATIM):
        return expression.value
    if kind == TypeKind.STRING_LITERAL:
        return 'std::string'
    if kind == TypeKind.ARRAY:
        return f"std::vector<{render_cpp_type(expression.items[0])}>"
    if kind == TypeKind.MAP:
        key, value = expression.items
        return f"std::unordered_map<{render_cpp_type(key)}, {render_cpp_type(value)}>"
    if kind == TypeKind.TUPLE:
        return f"std::tuple<{', '.join(render_cpp_type(i) for i in expression.items)}>"
    # Unordered alternatives; properties reorder them in the materializer
    return f"std::variant<{', '.join(render_cpp_type(i) for i in expression.items)}>"


# --- Documentation ---
def format_documentation(documentation: Optional[str], indent: str = "") -> str:
    """
    Render documentation text as a doc comment block, one line per input line.
    Text that is already a comment is only re-indented.
    """
    if not documentation or not documentation.strip():
        return ""
    lines = documentation.strip('\n').splitlines()
    if lines[0].lstrip().startswith(('/*', '//')):
        result = ""
        for line in lines:
            line = line.strip()
            # Continuation lines of a block comment stay aligned on the opening '/'
            result += f"{indent} {line}\n" if line.startswith('*') else f"{indent}{line}\n"
        return result
    result = f"{indent}/**\n"
    for line in lines:
        result += f"{indent} * {line}".rstrip() + "\n"
    result += f"{indent} */\n"
    return result


# --- Name Resolution ---
# Method namespaces that carry no meaning in the generated names
DEFAULT_METHOD_PREFIXES = ("$", "window", "client", "textDocument")


def method_to_name(method: str, prefixes: Iterable[str] = DEFAULT_METHOD_PREFIXES) -> str:
    """
    Derive a type name from a method: "window/logMessage" -> "LogMessage",
    "workspace/didChangeConfiguration" -> "WorkspaceDidChangeConfiguration".
    """
    names = method.split('/')
    if len(names) > 1 and names[0] in prefixes:
        names = names[1:]
    return ''.join(word[:1].upper() + word[1:] for word in names)


def parse_version(since: Optional[str]) -> Tuple[int, ...]:
    """'3.16.0' -> (3, 16, 0); a missing version sorts before every other."""
    if not since:
        return ()
    parts = []
    for part in since.strip().split('.'):
        digits = ''.join(c for c in part if c.isdigit())
        parts.append(int(digits) if digits else 0)
    return tuple(parts)
