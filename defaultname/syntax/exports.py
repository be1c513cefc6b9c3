"""Default export extraction and syntax checks over parsed module sources."""

from __future__ import annotations

from dataclasses import dataclass

from tree_sitter import Node

from defaultname.diagnostics import (
    SYNTAX_MISSING_TOKEN,
    SYNTAX_RETURN_OUTSIDE_FUNCTION,
    SYNTAX_UNEXPECTED_TOKEN,
    Diagnostic,
    DiagnosticSpec,
    sort_diagnostics,
)
from defaultname.syntax.parser import DEFAULT_LANGUAGE, ParsedSource, SourceLanguage, parse_source

_NAMED_DECLARATIONS = frozenset(
    {
        "abstract_class_declaration",
        "class",
        "class_declaration",
        "function",
        "function_declaration",
        "function_expression",
        "generator_function",
        "generator_function_declaration",
    }
)

# Nodes that open a function body, where `return` is allowed.
_FUNCTION_SCOPES = frozenset(
    {
        "arrow_function",
        "function",
        "function_declaration",
        "function_expression",
        "generator_function",
        "generator_function_declaration",
        "method_definition",
    }
)


@dataclass(frozen=True, slots=True)
class DefaultExportScan:
    """What a module's source says about its default export."""

    has_default: bool
    identifier_name: str | None
    diagnostics: tuple[Diagnostic, ...]


def find_default_export(text: str, *, language: SourceLanguage = DEFAULT_LANGUAGE) -> DefaultExportScan:
    """Locate the module's default export and, when statically known, the identifier declaring it.

    Named forms are `export default function NAME`, `export default class NAME`,
    `export default NAME` and `export { NAME as default }`. Anonymous functions and
    classes, other expressions and `export { x as default } from "m"` re-exports are
    default exports without an identifier. Syntax errors are reported in source order.
    """
    parsed = parse_source(text, language)
    has_default = False
    identifier_name: str | None = None
    for statement in parsed.root.named_children:
        if statement.type != "export_statement":
            continue
        found, name = _default_export_of(parsed, statement)
        if found:
            has_default, identifier_name = True, name
            break
    return DefaultExportScan(
        has_default=has_default,
        identifier_name=identifier_name,
        diagnostics=tuple(syntax_errors(parsed)),
    )


def syntax_errors(parsed: ParsedSource) -> list[Diagnostic]:
    """Error and missing nodes of the tree, plus `return` statements outside any function."""
    diagnostics: list[Diagnostic] = []
    stack: list[tuple[Node, bool]] = [(parsed.root, False)]
    while stack:
        node, in_function = stack.pop()
        if node.type == "ERROR":
            diagnostics.append(_syntax_diagnostic(parsed, node, SYNTAX_UNEXPECTED_TOKEN))
            continue
        if node.is_missing:
            diagnostics.append(
                _syntax_diagnostic(parsed, node, SYNTAX_MISSING_TOKEN, message=f"Missing `{node.type}`")
            )
            continue
        if node.type == "return_statement" and not in_function:
            diagnostics.append(_syntax_diagnostic(parsed, node, SYNTAX_RETURN_OUTSIDE_FUNCTION))
        nested = in_function or node.type in _FUNCTION_SCOPES
        stack.extend((child, nested) for child in node.children)
    return sort_diagnostics(diagnostics)


def _syntax_diagnostic(
    parsed: ParsedSource,
    node: Node,
    spec: DiagnosticSpec,
    *,
    message: str | None = None,
) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=message or spec.message,
        range=parsed.node_range(node),
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )


def _default_export_of(parsed: ParsedSource, statement: Node) -> tuple[bool, str | None]:
    if any(child.type == "default" for child in statement.children):
        declaration = statement.child_by_field_name("declaration")
        if declaration is not None:
            return True, _declared_name(parsed, declaration)
        value = statement.child_by_field_name("value")
        if value is not None and value.type == "identifier":
            return True, parsed.node_text(value)
        return True, None

    clause = next((child for child in statement.named_children if child.type == "export_clause"), None)
    if clause is None:
        return False, None
    reexport = statement.child_by_field_name("source") is not None
    for specifier in clause.named_children:
        if specifier.type != "export_specifier":
            continue
        local = specifier.child_by_field_name("name")
        exported = specifier.child_by_field_name("alias") or local
        if exported is None or _export_name(parsed, exported) != "default":
            continue
        if reexport or local is None or local.type != "identifier":
            return True, None
        return True, parsed.node_text(local)
    return False, None


def _declared_name(parsed: ParsedSource, declaration: Node) -> str | None:
    if declaration.type not in _NAMED_DECLARATIONS:
        return None
    name = declaration.child_by_field_name("name")
    return parsed.node_text(name) if name is not None else None


def _export_name(parsed: ParsedSource, node: Node) -> str:
    text = parsed.node_text(node)
    if node.type == "string":
        return text[1:-1]
    return text
