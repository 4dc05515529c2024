from __future__ import annotations

import logging

from cyclo.analysis.complexity import compute_file_complexity
from cyclo.analysis.nloc import count_nloc
from cyclo.core.errors import BadFileExtension
from cyclo.core.records import FileRecord
from cyclo.parsing.treesitter import Language, parse_file
from cyclo.utils.paths import record_labels

logger = logging.getLogger(__name__)


def analyze_file(path: str, root: str) -> FileRecord:
    """Build the record of one source file below ``root``.

    Raises:
        BadFileExtension: if no grammar matches the file name.
    """
    language = Language.for_path(path)
    if language is None:
        raise BadFileExtension(path)

    parsed = parse_file(path, language)
    complexity = compute_file_complexity(parsed.root_node, parsed.spec)
    nloc = count_nloc(parsed)
    label, parent = record_labels(path, root)

    logger.debug("%s: language=%s complexity=%d nloc=%d", label, language.value, complexity, nloc)
    return FileRecord(label=label, parent=parent, complexity=complexity, nloc=nloc)
