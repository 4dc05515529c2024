from __future__ import annotations

from typing import Set

from cyclo.core.errors import BadFileExtension
from cyclo.parsing.treesitter import C_SPEC, Language, LanguageSpec, ParsedFile, iter_nodes


def count_code_lines(root_node, spec: LanguageSpec = C_SPEC) -> int:
    """Count the source rows holding at least one non-comment token.

    Preprocessor lines, including ``#if 0`` regions, are code; blank
    lines and comments are not.
    """
    rows: Set[int] = set()
    for node in iter_nodes(root_node):
        if node.children or node.type in spec.comment_node_types:
            continue
        if node.start_byte == node.end_byte:
            continue
        start_row, end_row = node.start_point[0], node.end_point[0]
        # a token ending a line (e.g. a directive's newline) ends at column 0 of the next row
        if end_row > start_row and node.end_point[1] == 0:
            end_row -= 1
        rows.update(range(start_row, end_row + 1))
    return len(rows)


def count_nloc(parsed: ParsedFile) -> int:
    """Return the number of code lines in a parsed file.

    Raises:
        BadFileExtension: if the file name does not map to the grammar it was parsed with.
    """
    if Language.for_path(parsed.path) is not parsed.language:
        raise BadFileExtension(parsed.path)
    return count_code_lines(parsed.root_node, parsed.spec)
