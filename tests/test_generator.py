"""
Tests for the TypeScript document generator.
"""

import pytest

from pocketbase_typegen.codegen import generate
from pocketbase_typegen.codegen.core.config import DEFAULT_HEADER, GeneratorConfig, load_config
from pocketbase_typegen.codegen.core.generator import UnknownFieldTypeError, generate_code
from pocketbase_typegen.codegen.core.schema import Collection, Field
from pocketbase_typegen.codegen.languages.typescript import (
    TypeScriptGenerator,
    create_typescript_generator,
)

EXPECTED_SAMPLE = (
    "// This file was @generated using pocketbase-typegen\n"
    "\n"
    "export enum Collections {\n"
    '\tPosts = "posts",\n'
    '\tUserSessions = "user_sessions",\n'
    '\tUsers = "users",\n'
    "}\n"
    "\n"
    "export type PostsRecord = {\n"
    "\ttitle: string\n"
    '\tstatus: "open" | "closed"\n'
    "\tcover?: string[]\n"
    '\t"2fa"?: boolean\n'
    "}\n"
    "\n"
    "export type UserSessionsRecord = {\n"
    "\tdata?: null | unknown\n"
    "\tuser: string\n"
    "}\n"
    "\n"
    "export type UsersRecord = {\n"
    "\tname?: string\n"
    "\tavatar?: string\n"
    "}\n"
    "\n"
    "export type CollectionRecords = {\n"
    "\tposts: PostsRecord\n"
    "\tuser_sessions: UserSessionsRecord\n"
    "\tusers: UsersRecord\n"
    "}"
)


@pytest.fixture
def generator() -> TypeScriptGenerator:
    return TypeScriptGenerator()


class TestGenerate:
    """Tests for TypeScriptGenerator.generate()."""

    def test_full_document(self, generator, sample_collections):
        assert generator.generate(sample_collections) == EXPECTED_SAMPLE

    def test_deterministic(self, generator, sample_collections):
        first = generator.generate(sample_collections)
        second = TypeScriptGenerator().generate(sample_collections)
        assert first == second

    def test_source_order_does_not_matter(self, generator, sample_collections):
        reordered = list(reversed(sample_collections))
        assert generator.generate(reordered) == EXPECTED_SAMPLE

    def test_enum_sorted_by_name(self, generator):
        collections = [
            Collection("zeta", [Field("a", "text")]),
            Collection("alpha", [Field("a", "text")]),
        ]
        code = generator.generate(collections)
        assert code.index('Alpha = "alpha"') < code.index('Zeta = "zeta"')

    def test_empty_model(self, generator):
        code = generator.generate([])
        assert code == (
            f"{DEFAULT_HEADER}\n\n"
            "export enum Collections {\n}\n\n"
            "export type CollectionRecords = {\n}"
        )

    def test_collection_without_fields_has_no_record_type(self, generator):
        collections = [Collection("empty"), Collection("full", [Field("a", "text")])]
        code = generator.generate(collections)
        assert "EmptyRecord = {" not in code
        assert "export type FullRecord = {" in code
        assert '\tEmpty = "empty",' in code
        assert "\tempty: EmptyRecord" in code

    def test_unnamed_collection_left_out_of_index(self, generator):
        collections = [Collection("", [Field("a", "text", required=True)])]
        code = generator.generate(collections)
        assert "export type Record = {\n\ta: string\n}" in code
        assert "export enum Collections {\n}" in code

    def test_one_enum_and_one_mapping(self, generator, sample_collections):
        code = generator.generate(sample_collections)
        assert code.count("export enum ") == 1
        assert code.count("export type CollectionRecords") == 1

    def test_duplicate_fields_are_kept(self, generator):
        collection = Collection(
            "posts", [Field("title", "text"), Field("title", "number", required=True)]
        )
        assert generator.generate_record_type(collection) == (
            "export type PostsRecord = {\n\ttitle?: string\n\ttitle: number\n}"
        )

    def test_unknown_field_type_raises(self, generator):
        collections = [Collection("posts", [Field("weird", "bogus")])]
        with pytest.raises(UnknownFieldTypeError):
            generator.generate(collections)

    def test_package_level_generate(self, sample_collections):
        assert generate(sample_collections) == EXPECTED_SAMPLE


class TestRecordTypeOrder:
    """Record declarations sort by rendered text unless configured otherwise."""

    collections = [
        Collection("a", [Field("x", "text")]),
        Collection("B", [Field("x", "text")]),
    ]

    def test_text_order_by_default(self, generator):
        code = generator.generate(self.collections)
        assert code.index("export type ARecord") < code.index("export type BRecord")
        # Index follows raw names, where "B" sorts before "a"
        assert code.index('B = "B"') < code.index('A = "a"')

    def test_name_order(self):
        generator = create_typescript_generator(record_type_order="name")
        code = generator.generate(self.collections)
        assert code.index("export type BRecord") < code.index("export type ARecord")


class TestConfiguredNames:
    def test_names_header_and_indent(self):
        config = GeneratorConfig(
            header="// custom",
            indent="  ",
            enum_name="Tables",
            records_type_name="TableRows",
            record_suffix="Row",
        )
        code = TypeScriptGenerator(config).generate(
            [Collection("posts", [Field("title", "text", required=True)])]
        )
        assert code == (
            "// custom\n\n"
            'export enum Tables {\n  Posts = "posts",\n}\n\n'
            "export type PostsRow = {\n  title: string\n}\n\n"
            "export type TableRows = {\n  posts: PostsRow\n}"
        )

    def test_type_overrides_from_config(self):
        config = load_config(custom_config={"type_overrides": {"editor": "string"}})
        code = TypeScriptGenerator(config).generate(
            [Collection("posts", [Field("body", "editor")])]
        )
        assert "\tbody?: string\n" in code


class TestGenerateCode:
    """Tests for the generate_code() wrapper."""

    def test_success_metadata(self, generator, sample_collections):
        result = generate_code(generator, sample_collections)
        assert result.success
        assert result.code == EXPECTED_SAMPLE
        assert result.warnings == []
        assert result.metadata == {
            "language": "typescript",
            "file_extension": ".ts",
            "collection_count": 3,
            "field_count": 8,
            "record_type_count": 3,
        }

    def test_unknown_type_gives_no_document(self, generator):
        result = generate_code(generator, [Collection("posts", [Field("x", "bogus")])])
        assert not result.success
        assert result.code == ""
        assert isinstance(result.exception, UnknownFieldTypeError)
        assert "unknown type bogus" in result.error_message

    def test_warnings(self, generator):
        collections = [
            Collection("posts", [Field("a", "text"), Field("a", "text")]),
            Collection("posts", [Field("b", "text")]),
            Collection("empty"),
            Collection("", [Field("c", "text")]),
        ]
        result = generate_code(generator, collections)
        assert result.success
        assert "Collection 'posts' is defined 2 times" in result.warnings
        assert "Field 'a' appears 2 times in 'posts'" in result.warnings
        assert any("'empty' has no fields" in w for w in result.warnings)
        assert any("empty name" in w for w in result.warnings)

    def test_warnings_use_quoted_member_names(self, generator):
        collections = [Collection("posts", [Field("1a", "text"), Field("1a", "bool")])]
        result = generate_code(generator, collections)
        assert "Field '\"1a\"' appears 2 times in 'posts'" in result.warnings
