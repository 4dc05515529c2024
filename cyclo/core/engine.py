"""
Directory-level aggregation of per-file complexity records.

The engine walks a source tree, runs the file analyzer on every eligible
file and adds a zero-valued record for each directory on the way to the
root, so the resulting record set forms a single tree usable by a treemap.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Set, Tuple, Union

from cyclo.analysis.files import analyze_file
from cyclo.core.config import Config
from cyclo.core.errors import BadFileExtension
from cyclo.core.records import AnalysisReport, FileRecord, SkippedFile
from cyclo.utils.files import iter_source_files
from cyclo.utils.paths import directory_chain

logger = logging.getLogger(__name__)

Outcome = Union[FileRecord, SkippedFile]


class AnalysisEngine:
    """
    Builds an AnalysisReport for a directory.

    Files are analyzed independently, optionally on a thread pool, but the
    results are always merged in discovery order so two runs over the same
    tree produce the same record sequence.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config.default()
        self.extensions = self.config.extensions()
        self.include_hidden = self.config.include_hidden()
        self.max_workers = self.config.jobs()

    def discover_files(self, root: str) -> List[str]:
        return list(iter_source_files(root, self.extensions, self.include_hidden))

    def analyze(self, root: str) -> AnalysisReport:
        """
        Analyze every eligible file below ``root``.

        Raises:
            NotADirectoryError: if ``root`` is not a directory.
        """
        if not os.path.isdir(root):
            raise NotADirectoryError(f"Not a directory: {root}")

        files = self.discover_files(root)
        logger.info("Analyzing %d file(s) under %s", len(files), root)

        records: List[FileRecord] = []
        skipped: List[SkippedFile] = []
        seen: Set[str] = set()

        for path, outcome in self._run(files, root):
            if isinstance(outcome, SkippedFile):
                logger.warning("Skipping %s: %s", path, outcome.reason)
                skipped.append(outcome)
                continue
            records.append(outcome)
            seen.add(outcome.label)
            records.extend(self._missing_directories(outcome, seen))

        return AnalysisReport(root=root, records=tuple(records), skipped=skipped)

    def _run(self, files: List[str], root: str) -> Iterable[Tuple[str, Outcome]]:
        if len(files) > 1 and self.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                outcomes = list(executor.map(lambda f: self._analyze_one(f, root), files))
        else:
            outcomes = [self._analyze_one(f, root) for f in files]
        return zip(files, outcomes)

    def _analyze_one(self, path: str, root: str) -> Outcome:
        try:
            return analyze_file(path, root)
        except BadFileExtension as exc:
            return SkippedFile(path=path, reason=str(exc))
        except OSError as exc:
            return SkippedFile(path=path, reason=f"unreadable: {exc}")

    @staticmethod
    def _missing_directories(record: FileRecord, seen: Set[str]) -> List[FileRecord]:
        directories = []
        for label, parent in directory_chain(record.parent):
            # Ancestors of a known directory were added along with it.
            if label in seen:
                break
            seen.add(label)
            directories.append(FileRecord.directory(label, parent))
        return directories
