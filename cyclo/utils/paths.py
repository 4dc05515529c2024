from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Tuple

SEPARATOR = "/"


def root_label(root: str) -> str:
    name = Path(os.path.abspath(root)).name
    return name or "."


def record_labels(path: str, root: str) -> Tuple[str, str]:
    """Return ``(label, parent)`` for a file below ``root``.

    Labels start with the name of the root directory, so ``src/io/read.c``
    analyzed from ``src`` is labelled ``src/io/read.c`` with parent ``src/io``.
    """
    relative = Path(os.path.abspath(path)).relative_to(os.path.abspath(root))
    parts = [root_label(root), *relative.parts]
    return SEPARATOR.join(parts), SEPARATOR.join(parts[:-1])


def directory_chain(parent: str) -> Iterable[Tuple[str, str]]:
    """Yield ``(label, parent)`` for ``parent`` and each of its ancestors, innermost first.

    The outermost directory gets ``""`` as its parent.
    """
    parts = parent.split(SEPARATOR) if parent else []
    while parts:
        label = SEPARATOR.join(parts)
        parts.pop()
        yield label, SEPARATOR.join(parts)
