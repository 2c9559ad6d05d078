from generators.cpp_json_generator import CppJsonGenerator
from model_transforms.model_transform_pipeline import run_model_transform_pipeline
from spec_model import Interface, Property
from tests.test_utils import make_enum, make_interface, make_model


def test_string_enumeration_table():
    model = make_model(enumerations=[
        make_enum("MarkupKind", [("PlainText", "plaintext"), ("Markdown", "markdown")], is_string=True),
        make_enum("SymbolKind", [("File", "1")]),
    ])
    text = CppJsonGenerator(model).generate_declarations()
    assert text == (
        "\nJSONIFY_ENUM( MarkupKind, {\n"
        "    {MarkupKind::PlainText, \"plaintext\"},\n"
        "    {MarkupKind::Markdown, \"markdown\"},\n"
        "})\n"
    )


def test_flattened_binding():
    model = make_model(interfaces=[
        make_interface("Base", [("a", "string"), ("b?", "integer")]),
        make_interface("Derived", [("c", "boolean")], extends=["Base"]),
    ])
    text = CppJsonGenerator(model).generate_declarations()
    assert "\nJSONIFY(Base, a, b)\n" in text
    assert "\nJSONIFY(Derived, c, a, b)\n" in text


def test_empty_binding():
    model = make_model(interfaces=[make_interface("Empty")])
    assert CppJsonGenerator(model).generate_declarations() == "\nJSONIFY_EMPTY(Empty)\n"


def test_forward_only_bindings():
    model = make_model(interfaces=[
        make_interface("SelectionRange", [("range", "Range"), ("parent?", "SelectionRange")]),
        make_interface("FormattingOptions", [("tabSize", "uinteger")]),
    ])
    text = CppJsonGenerator(model).generate_declarations()
    assert text == "\nJSONIFY_FWD(SelectionRange)\n\nJSONIFY_FWD(FormattingOptions)\n"


def test_nested_children_are_scoped_and_first():
    full = Interface("Full", properties=[Property("delta?", "boolean")])
    empty = Interface("Nothing")
    requests = Interface("Requests", properties=[Property("full?", "boolean | Full")], children=[full, empty])
    caps = Interface("Caps", properties=[Property("requests", "Requests")], children=[requests])
    text = CppJsonGenerator(make_model(interfaces=[caps])).generate_declarations()
    assert text == (
        "\n"
        "JSONIFY(Caps::Requests::Full, delta)\n"
        "JSONIFY_EMPTY(Caps::Requests::Nothing)\n"
        "JSONIFY(Caps::Requests, full)\n"
        "JSONIFY(Caps, requests)\n"
    )


def test_bindings_header(sample_model):
    model = run_model_transform_pipeline(sample_model)
    content = CppJsonGenerator(model).generate_header()["types_json.h"]
    assert '#include "json.h"\n#include "types.h"\n' in content
    assert "JSONIFY(CreateFile, kind, uri, kind, annotationId)" in content
    assert "JSONIFY(HoverParams, textDocument, position)" in content
    assert "JSONIFY_FWD(SelectionRange)" in content
    assert "JSONIFY(Message," not in content
    assert "{MarkupKind::PlainText, \"plaintext\"}" in content
