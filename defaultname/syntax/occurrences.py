"""Default import / default re-export specifier occurrences in module source text."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Final, Literal, TypeAlias

from tree_sitter import Node

from defaultname.syntax.parser import DEFAULT_LANGUAGE, ParsedSource, SourceLanguage, parse_source, walk
from defaultname.text import TextRange

SpecifierRole: TypeAlias = Literal["import", "export"]

# `export x from "m"` and `export x, { y } from "m"` have no node in the JS/TS grammars,
# so those re-exports are matched in the text and checked against the tree.
_EXPORT_DEFAULT_FROM: Final = re.compile(
    r"""(?<![\w$.])export\s+(?P<name>[A-Za-z_$][\w$]*)\s*"""
    r"""(?:,\s*(?:\{[^}]*\}|\*\s*as\s+[A-Za-z_$][\w$]*)\s*)?"""
    r"""from\s*(?P<module>"[^"\r\n]*"|'[^'\r\n]*')"""
)

_NON_CODE_NODES = frozenset(
    {
        "comment",
        "html_comment",
        "jsx_text",
        "regex",
        "regex_pattern",
        "string",
        "string_fragment",
        "template_string",
    }
)


@dataclass(frozen=True, slots=True)
class SpecifierOccurrence:
    """One default-import or default-export-rename site."""

    name: str
    module: str
    role: SpecifierRole
    range: TextRange
    module_range: TextRange


def scan_specifiers(text: str, *, language: SourceLanguage = DEFAULT_LANGUAGE) -> tuple[SpecifierOccurrence, ...]:
    """Find default imports and `export x from` re-exports, in source order.

    Named-only, namespace, side-effect, dynamic and `import type` imports are
    skipped, as are imports the parser could not read in full.
    """
    parsed = parse_source(text, language)
    occurrences: list[SpecifierOccurrence] = []
    for node in walk(parsed.root):
        if node.type == "import_statement":
            occurrence = _import_occurrence(parsed, node)
            if occurrence is not None:
                occurrences.append(occurrence)
    occurrences.extend(_export_default_from_occurrences(parsed))
    return tuple(sorted(occurrences, key=lambda occurrence: occurrence.range.start))


def _import_occurrence(parsed: ParsedSource, statement: Node) -> SpecifierOccurrence | None:
    if statement.has_error:
        return None
    if any(child.type in ("type", "typeof") for child in statement.children):
        return None
    clause = next((child for child in statement.named_children if child.type == "import_clause"), None)
    source = statement.child_by_field_name("source")
    if clause is None or source is None:
        return None
    binding = next((child for child in clause.named_children if child.type == "identifier"), None)
    if binding is None:
        return None
    return SpecifierOccurrence(
        name=parsed.node_text(binding),
        module=parsed.node_text(source)[1:-1],
        role="import",
        range=parsed.node_range(binding),
        module_range=parsed.node_range(source),
    )


def _export_default_from_occurrences(parsed: ParsedSource) -> list[SpecifierOccurrence]:
    occurrences: list[SpecifierOccurrence] = []
    for match in _EXPORT_DEFAULT_FROM.finditer(parsed.text):
        start = parsed.byte_offset(match.start())
        node = parsed.root.descendant_for_byte_range(start, start + len("export"))
        if _inside_non_code(node):
            continue
        module = match.group("module")
        occurrences.append(
            SpecifierOccurrence(
                name=match.group("name"),
                module=module[1:-1],
                role="export",
                range=TextRange(match.start("name"), match.end("name")),
                module_range=TextRange(match.start("module"), match.end("module")),
            )
        )
    return occurrences


def _inside_non_code(node: Node | None) -> bool:
    while node is not None:
        if node.type in _NON_CODE_NODES:
            return True
        node = node.parent
    return False
