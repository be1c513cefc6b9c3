from defaultname.naming import (
    CaseTransform,
    apply_case_transform,
    camel_case,
    format_name_variants,
    pascal_case,
    snake_case,
    split_words,
)

SAMPLES = (
    "foo-bar",
    "foo_bar",
    "fooBar",
    "FooBar",
    "FOO_BAR",
    "XMLHttpRequest",
    "version 1.2.10",
    "button.module",
    "  padded  name  ",
    "a",
    "",
)


def test_split_words_on_case_changes_and_separators() -> None:
    assert split_words("fooBar-baz_HTMLParser2") == ["foo", "Bar", "baz", "HTML", "Parser2"]
    assert split_words("version 1.2.10") == ["version", "1", "2", "10"]
    assert split_words("__") == []


def test_split_words_digits_only_break_before_uppercase() -> None:
    assert split_words("foo2bar") == ["foo2bar"]
    assert split_words("version2Beta") == ["version2", "Beta"]
    assert camel_case("item2name") == "item2name"
    assert camel_case("item2-name") == "item2Name"
    assert pascal_case("h1 title") == "H1Title"
    assert snake_case("v2Api") == "v2_api"


def test_camel_case() -> None:
    assert camel_case("foo-bar") == "fooBar"
    assert camel_case("foo_barStyles") == "fooBarStyles"
    assert camel_case("FooBar") == "fooBar"
    assert camel_case("XMLHttpRequest") == "xmlHttpRequest"
    assert camel_case("version 1.2.10") == "version_1_2_10"


def test_pascal_case() -> None:
    assert pascal_case("foo-bar") == "FooBar"
    assert pascal_case("fooBar") == "FooBar"
    assert pascal_case("FOO_BAR") == "FooBar"
    assert pascal_case("version 1.2.10") == "Version_1_2_10"


def test_snake_case() -> None:
    assert snake_case("fooBar") == "foo_bar"
    assert snake_case("FooBar") == "foo_bar"
    assert snake_case("foo-bar baz") == "foo_bar_baz"
    assert snake_case("XMLHttpRequest") == "xml_http_request"


def test_case_transforms_are_idempotent() -> None:
    for transform in (CaseTransform.CAMEL, CaseTransform.PASCAL, CaseTransform.SNAKE):
        for sample in SAMPLES:
            once = apply_case_transform(sample, transform)
            assert apply_case_transform(once, transform) == once, (transform, sample)


def test_case_transform_identity_for_none_and_unknown() -> None:
    assert apply_case_transform("foo-bar", CaseTransform.NONE) == "foo-bar"
    assert apply_case_transform("foo-bar", None) == "foo-bar"
    assert apply_case_transform("foo-bar", "kebab-case") == "foo-bar"


def test_case_transform_accepts_plain_strings() -> None:
    assert apply_case_transform("foo-bar", "camelCase") == "fooBar"
    assert apply_case_transform("foo-bar", "PascalCase") == "FooBar"
    assert apply_case_transform("fooBar", "snake_case") == "foo_bar"


def test_format_name_variants() -> None:
    assert format_name_variants(["a"]) == "'a'"
    assert format_name_variants(["a", "b"]) == "'a' or 'b'"
    assert format_name_variants(["a", "b", "c"]) == "'a', 'b' or 'c'"
    assert format_name_variants(("a", "b", "c", "d")) == "'a', 'b', 'c' or 'd'"


def test_format_name_variants_rejects_empty_list() -> None:
    try:
        format_name_variants([])
    except ValueError as exc:
        assert "At least one name" in str(exc)
    else:
        raise AssertionError("Expected ValueError for an empty name list")
