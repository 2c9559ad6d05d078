from model_transforms.dedup_enumerations_transform import DedupEnumerationsTransform
from model_transforms.model_transform_pipeline import default_cleanup_transforms, run_model_transform_pipeline
from model_transforms.normalize_enum_values_transform import NormalizeEnumValuesTransform
from model_transforms.prune_dependencies_transform import PruneDependenciesTransform
from model_transforms.remove_denylisted_types_transform import RemoveDenylistedTypesTransform
from model_transforms.remove_duplicate_types_transform import RemoveDuplicateTypesTransform
from model_transforms.rename_enumerations_transform import RenameEnumerationsTransform
from tests.test_utils import make_alias, make_enum, make_interface, make_model


def test_dedup_keeps_first_enumeration():
    model = make_model(enumerations=[
        make_enum("SymbolKind", [("File", "1")]),
        make_enum("MarkupKind", [("plainText", "'plaintext'")], is_string=True),
        make_enum("SymbolKind", [("Other", "7")]),
    ])
    model = DedupEnumerationsTransform().transform(model)
    assert [e.name for e in model.enumerations] == ["SymbolKind", "MarkupKind"]
    assert [v.name for v in model.enumerations[0].values] == ["File"]


def test_rename_special_enumerations():
    model = make_model(enumerations=[make_enum("InitializeError", [("unknownProtocolVersion", "1")])])
    model = RenameEnumerationsTransform().transform(model)
    assert model.enumerations[0].name == "InitializeErrorCodes"


def test_rename_with_custom_table():
    model = make_model(enumerations=[make_enum("Foo", [])])
    model = RenameEnumerationsTransform({"Foo": "Bar"}).transform(model)
    assert model.enumerations[0].name == "Bar"


def test_normalize_string_enumeration_values():
    model = make_model(enumerations=[
        make_enum("MarkupKind", [("plainText", "'plaintext'"), ("markdown", "'markdown'")], is_string=True),
    ])
    model = NormalizeEnumValuesTransform().transform(model)
    values = model.enumerations[0].values
    assert [(v.name, v.value) for v in values] == [("PlainText", "plaintext"), ("Markdown", "markdown")]


def test_normalize_numeric_enumeration_values():
    model = make_model(enumerations=[
        make_enum("ErrorCodes", [
            ("parseError", "-32700"),
            ("jsonrpcReservedErrorRangeStart", "-32099"),
            ("serverErrorStart", "jsonrpcReservedErrorRangeStart"),
        ]),
    ])
    model = NormalizeEnumValuesTransform().transform(model)
    assert [(v.name, v.value) for v in model.enumerations[0].values] == [
        ("ParseError", "-32700"),
        ("JsonrpcReservedErrorRangeStart", "-32099"),
        ("ServerErrorStart", "JsonrpcReservedErrorRangeStart"),
    ]


def test_remove_denylisted_types():
    model = make_model(
        types=[make_alias("LSPAny", "LSPObject | string"), make_alias("DocumentUri", "string")],
        interfaces=[make_interface(name) for name in
                    ["Message", "RequestMessage", "ResponseMessage", "ResponseError",
                     "NotificationMessage", "LSPObject", "T", "Range"]],
    )
    model = RemoveDenylistedTypesTransform().transform(model)
    assert [i.name for i in model.interfaces] == ["Range"]
    assert [t.name for t in model.types] == ["DocumentUri"]


def test_remove_duplicate_types():
    model = make_model(
        enumerations=[make_enum("MarkupKind", [], is_string=True)],
        types=[make_alias("MarkupKind", "'plaintext' | 'markdown'"), make_alias("Range", "string"),
               make_alias("DocumentUri", "string")],
        interfaces=[make_interface("Range")],
    )
    model = RemoveDuplicateTypesTransform().transform(model)
    assert [t.name for t in model.types] == ["DocumentUri"]
    assert [i.name for i in model.interfaces] == ["Range"]


def test_prune_dependencies():
    model = make_model(
        enumerations=[make_enum("MarkupKind", [], is_string=True)],
        types=[make_alias("Definition", "Location", dependencies=["Location", "LSPAny"])],
        interfaces=[
            make_interface("Location"),
            make_interface("Hover", dependencies=["MarkupKind", "Location", "Hover", "Message"]),
        ],
    )
    model = PruneDependenciesTransform().transform(model)
    assert model.types[0].dependencies == ["Location"]
    assert model.find_interface("Hover").dependencies == ["Location"]


def test_default_pipeline_order_and_idempotence():
    transforms = default_cleanup_transforms()
    assert [type(t).__name__ for t in transforms] == [
        "DedupEnumerationsTransform",
        "RenameEnumerationsTransform",
        "NormalizeEnumValuesTransform",
        "RemoveDenylistedTypesTransform",
        "RemoveDuplicateTypesTransform",
        "PruneDependenciesTransform",
    ]

    def build():
        return make_model(
            enumerations=[make_enum("InitializeError", [("unknownProtocolVersion", "1")]),
                          make_enum("InitializeError", [("other", "2")])],
            types=[make_alias("LSPAny", "string"), make_alias("InitializeError", "string")],
            interfaces=[make_interface("InitializeError", dependencies=["InitializeErrorCodes", "LSPAny"])],
        )

    once = run_model_transform_pipeline(build())
    twice = run_model_transform_pipeline(run_model_transform_pipeline(build()))
    for model in (once, twice):
        assert [e.name for e in model.enumerations] == ["InitializeErrorCodes"]
        assert [v.name for v in model.enumerations[0].values] == ["UnknownProtocolVersion"]
        assert model.types == []
        assert model.interfaces[0].dependencies == []
