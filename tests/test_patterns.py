from defaultname.config import OverrideRule
from defaultname.errors import ConfigurationError
from defaultname.naming import CaseTransform
from defaultname.patterns import IgnoreFilter, OverrideResolver, compile_pattern, is_regex_literal, substitute_captures


def test_compile_literal_pattern_matches_exact_string_only() -> None:
    matcher = compile_pattern("react")

    assert matcher.is_regex is False
    assert matcher.match("react") == ()
    assert matcher.match("react-dom") is None
    assert matcher.match("preact") is None


def test_compile_regex_pattern_searches_and_exposes_groups() -> None:
    matcher = compile_pattern(r"/(\w+)\.module\.(css|scss)$/")

    assert matcher.is_regex is True
    assert matcher.match("./foo_bar.module.css") == ("foo_bar", "css")
    assert matcher.match("./button.module.scss") == ("button", "scss")
    assert matcher.match("./button.css") is None


def test_compile_regex_pattern_allows_absent_groups() -> None:
    matcher = compile_pattern("/^(a)?b$/")

    assert matcher.match("b") == (None,)
    assert matcher.match("ab") == ("a",)


def test_compile_regex_accepts_javascript_named_groups() -> None:
    matcher = compile_pattern(r"/(?<base>\w+)\.svg$/")

    assert matcher.match("./icons/arrow.svg") == ("arrow",)


def test_compile_regex_uses_ascii_word_class() -> None:
    matcher = compile_pattern(r"/^\w+$/")

    assert matcher.match("plain_name") == ()
    assert matcher.match("naïve") is None


def test_regex_literal_detection() -> None:
    assert is_regex_literal("/abc/")
    assert is_regex_literal("//")
    assert not is_regex_literal("/")
    assert not is_regex_literal("/abc")
    assert not is_regex_literal("abc/")
    assert not is_regex_literal("/node_modules/x")


def test_compile_invalid_regex_raises_configuration_error() -> None:
    try:
        compile_pattern("/(unclosed/")
    except ConfigurationError as exc:
        assert "Invalid regular expression" in str(exc)
    else:
        raise AssertionError("Expected ConfigurationError for an invalid regex body")


def test_ignore_filter_literal_patterns_are_substring_matches() -> None:
    ignore = IgnoreFilter.from_patterns(["/vendor/", "generated"])

    assert ignore.is_ignored("/repo/vendor/lib.js")
    assert ignore.is_ignored("/repo/src/generated.ts")
    assert not ignore.is_ignored("/repo/src/vendors.js")


def test_ignore_filter_regex_patterns_search_the_path() -> None:
    ignore = IgnoreFilter.from_patterns([r"/\.test\.[jt]s$/"])

    assert ignore.is_ignored("/repo/src/a.test.ts")
    assert not ignore.is_ignored("/repo/src/a.ts")


def test_ignore_filter_is_order_independent() -> None:
    paths = ["/a/node_modules/x.js", "/a/src/x.generated.js", "/a/src/x.js"]
    patterns = ["/node_modules/", r"/\.generated\.js$/"]

    forward = IgnoreFilter.from_patterns(patterns)
    backward = IgnoreFilter.from_patterns(list(reversed(patterns)))

    assert [forward.is_ignored(path) for path in paths] == [True, True, False]
    assert [backward.is_ignored(path) for path in paths] == [True, True, False]


def test_ignore_filter_default_and_empty() -> None:
    assert IgnoreFilter.default().is_ignored("/project/node_modules/react/index.js")
    assert not IgnoreFilter.default().is_ignored("react")
    assert not IgnoreFilter.from_patterns([]).is_ignored("/project/node_modules/react/index.js")


def test_substitute_captures() -> None:
    assert substitute_captures("$1Styles", ("foo",)) == "fooStyles"
    assert substitute_captures("use$1$2", ("Foo", "Bar")) == "useFooBar"
    assert substitute_captures("prefix$1", ("x",)) == "prefixx"
    assert substitute_captures(r"cost\$1", ("x",)) == "cost$1"
    assert substitute_captures("$2", ("x",)) == ""
    assert substitute_captures("$1", (None,)) == ""
    assert substitute_captures("$0", ("x",)) == "$0"


def test_override_resolver_substitutes_groups_and_transforms() -> None:
    resolver = OverrideResolver.from_rules(
        [OverrideRule(module=r"/(\w+)\.module\.css$/", names=("$1Styles",), transform=CaseTransform.CAMEL)]
    )

    assert resolver.resolve("./foo_bar.module.css") == ("fooBarStyles",)
    assert resolver.resolve("./foo.css") is None


def test_override_resolver_with_dashed_module_names() -> None:
    resolver = OverrideResolver.from_rules(
        [OverrideRule(module=r"/([\w-]+)\.module\.css$/", names=("$1Styles",), transform=CaseTransform.CAMEL)]
    )

    assert resolver.resolve("foo-bar.module.css") == ("fooBarStyles",)


def test_override_resolver_is_first_match_wins() -> None:
    resolver = OverrideResolver.from_rules(
        [
            OverrideRule(module=r"/\.css$/", names=("styles",)),
            OverrideRule(module=r"/(\w+)\.module\.css$/", names=("$1Styles", "classes")),
        ]
    )

    assert resolver.resolve("./button.module.css") == ("styles",)


def test_override_resolver_returns_every_name_in_order() -> None:
    resolver = OverrideResolver.from_rules(
        [OverrideRule(module="react", names=("React", "react"))],
    )

    assert resolver.resolve("react") == ("React", "react")
    assert resolver.resolve("react-dom") is None


def test_override_literal_module_substitutes_empty_groups() -> None:
    resolver = OverrideResolver.from_rules([OverrideRule(module="lodash", names=("$1Utils",))])

    assert resolver.resolve("lodash") == ("Utils",)


def test_override_resolver_without_rules() -> None:
    assert OverrideResolver().resolve("anything") is None


def test_override_resolver_rejects_invalid_regex_at_build_time() -> None:
    try:
        OverrideResolver.from_rules([OverrideRule(module="/[/", names=("x",))])
    except ConfigurationError as exc:
        assert "/[/" in str(exc)
    else:
        raise AssertionError("Expected ConfigurationError for an invalid override pattern")
