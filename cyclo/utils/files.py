from __future__ import annotations

import os
from typing import Iterable, Sequence

from cyclo.parsing.treesitter import LANGUAGE_SPECS

DEFAULT_EXTENSIONS = tuple(ext for spec in LANGUAGE_SPECS.values() for ext in spec.extensions)


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def is_eligible(name: str, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> bool:
    return any(name.endswith(ext) for ext in extensions)


def iter_source_files(
    root: str,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    include_hidden: bool = False,
) -> Iterable[str]:
    """Yield eligible files below ``root`` in a stable, sorted order.

    Hidden entries are pruned below the root only, so ``.`` can be analyzed.
    """
    for current, dirs, files in os.walk(root):
        dirs[:] = sorted(d for d in dirs if include_hidden or not is_hidden(d))
        for name in sorted(files):
            if not include_hidden and is_hidden(name):
                continue
            if is_eligible(name, extensions):
                yield os.path.join(current, name)
