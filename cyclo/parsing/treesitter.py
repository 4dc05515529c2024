from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

import tree_sitter_c
import tree_sitter_cpp
from tree_sitter import Language as TreeSitterLanguage
from tree_sitter import Parser


class Language(Enum):
    C = "c"
    CPP = "cpp"

    @classmethod
    def for_path(cls, path: str) -> Optional["Language"]:
        name = Path(path).name
        for language, spec in LANGUAGE_SPECS.items():
            if any(name.endswith(ext) for ext in spec.extensions):
                return language
        return None


@dataclass(frozen=True)
class LanguageSpec:
    name: str
    extensions: tuple[str, ...]
    function_node_types: frozenset[str]
    block_node_types: frozenset[str]
    comment_node_types: frozenset[str]
    decision_node_types: frozenset[str]
    condition_node_types: frozenset[str]
    binary_node_types: frozenset[str]
    short_circuit_operators: frozenset[str]
    transparent_node_types: frozenset[str]


# Decision statements as listed in the CCCC user guide.
_DECISION_NODE_TYPES = frozenset(
    {
        "if_statement",
        "for_statement",
        "while_statement",
        "switch_statement",
        "break_statement",
        "goto_statement",
    }
)

C_SPEC = LanguageSpec(
    name="c",
    extensions=(".c",),
    function_node_types=frozenset({"function_definition"}),
    block_node_types=frozenset({"compound_statement"}),
    comment_node_types=frozenset({"comment"}),
    decision_node_types=_DECISION_NODE_TYPES,
    condition_node_types=frozenset({"parenthesized_expression"}),
    binary_node_types=frozenset({"binary_expression"}),
    short_circuit_operators=frozenset({"&&", "||"}),
    # else bodies sit one level deeper than the if body
    transparent_node_types=frozenset({"else_clause"}),
)

CPP_SPEC = LanguageSpec(
    name="cpp",
    extensions=(".cpp", ".cc", ".cxx"),
    function_node_types=frozenset({"function_definition"}),
    block_node_types=frozenset({"compound_statement"}),
    comment_node_types=frozenset({"comment"}),
    decision_node_types=_DECISION_NODE_TYPES,
    condition_node_types=frozenset({"parenthesized_expression", "condition_clause"}),
    binary_node_types=frozenset({"binary_expression"}),
    short_circuit_operators=frozenset({"&&", "||"}),
    transparent_node_types=frozenset({"else_clause"}),
)

LANGUAGE_SPECS = {
    Language.C: C_SPEC,
    Language.CPP: CPP_SPEC,
}

_GRAMMARS = {
    Language.C: tree_sitter_c.language,
    Language.CPP: tree_sitter_cpp.language,
}


@dataclass(frozen=True)
class ParsedFile:
    path: str
    language: Language
    source: bytes
    tree: object
    spec: LanguageSpec

    @property
    def root_node(self):
        return self.tree.root_node


def get_parser(language: Language) -> Parser:
    return Parser(TreeSitterLanguage(_GRAMMARS[language]()))


def parse_source(source: bytes, language: Language, path: str = "<memory>") -> ParsedFile:
    tree = get_parser(language).parse(source)
    return ParsedFile(
        path=path,
        language=language,
        source=source,
        tree=tree,
        spec=LANGUAGE_SPECS[language],
    )


def parse_file(path: str, language: Language) -> ParsedFile:
    source = Path(path).read_bytes()
    return parse_source(source, language, path=path)


def iter_nodes(node) -> Iterable[object]:
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))
