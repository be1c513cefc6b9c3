"""Tree-sitter parsers for JavaScript and TypeScript module sources."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Final, Literal, TypeAlias

from tree_sitter import Node, Parser, Tree
from tree_sitter_language_pack import get_language

from defaultname.text import TextRange

logger = logging.getLogger(__name__)

SourceLanguage: TypeAlias = Literal["javascript", "typescript", "tsx"]

# TSX accepts both TypeScript syntax and JSX, so it is used when the file type is unknown.
DEFAULT_LANGUAGE: Final[SourceLanguage] = "tsx"

_LANGUAGE_BY_SUFFIX: Final[dict[str, SourceLanguage]] = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}


class ParserRegistry:
    """Lazily created, cached tree-sitter parsers keyed by language."""

    def __init__(self) -> None:
        self._parsers: dict[SourceLanguage, Parser] = {}

    def get_parser(self, language: SourceLanguage) -> Parser:
        parser = self._parsers.get(language)
        if parser is None:
            parser = Parser(get_language(language))
            self._parsers[language] = parser
            logger.debug("Loaded %s parser", language)
        return parser


_registry: ParserRegistry | None = None


def get_registry() -> ParserRegistry:
    global _registry
    if _registry is None:
        _registry = ParserRegistry()
    return _registry


def language_for_path(path: str | Path | None) -> SourceLanguage:
    if path is None:
        return DEFAULT_LANGUAGE
    return _LANGUAGE_BY_SUFFIX.get(Path(path).suffix.lower(), DEFAULT_LANGUAGE)


@dataclass(frozen=True, slots=True)
class ParsedSource:
    """Source text with its syntax tree.

    Tree-sitter positions are UTF-8 byte offsets; `TextRange`s handed out here are
    character offsets into `text`.
    """

    text: str
    data: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def char_offset(self, byte_offset: int) -> int:
        if len(self.data) == len(self.text):
            return byte_offset
        return len(self.data[:byte_offset].decode("utf-8"))

    def byte_offset(self, char_offset: int) -> int:
        if len(self.data) == len(self.text):
            return char_offset
        return len(self.text[:char_offset].encode("utf-8"))

    def node_range(self, node: Node) -> TextRange:
        return TextRange(self.char_offset(node.start_byte), self.char_offset(node.end_byte))

    def node_text(self, node: Node) -> str:
        return self.data[node.start_byte : node.end_byte].decode("utf-8")


def parse_source(text: str, language: SourceLanguage = DEFAULT_LANGUAGE) -> ParsedSource:
    data = text.encode("utf-8")
    tree = get_registry().get_parser(language).parse(data)
    return ParsedSource(text=text, data=data, tree=tree)


def walk(node: Node) -> Iterator[Node]:
    """Depth-first, source-ordered traversal of `node` and its descendants."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))
