from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class FileRecord:
    label: str
    parent: str
    complexity: int = 0
    nloc: int = 0
    is_directory: bool = False

    @classmethod
    def directory(cls, label: str, parent: str) -> "FileRecord":
        return cls(label=label, parent=parent, is_directory=True)


@dataclass(frozen=True)
class SkippedFile:
    path: str
    reason: str


@dataclass(frozen=True)
class AnalysisReport:
    root: str
    records: Tuple[FileRecord, ...]
    skipped: List[SkippedFile] = field(default_factory=list)

    @property
    def files_analyzed(self) -> int:
        return sum(1 for record in self.records if not record.is_directory)

    @property
    def directories(self) -> int:
        return sum(1 for record in self.records if record.is_directory)

    @property
    def total_nloc(self) -> int:
        return sum(record.nloc for record in self.records)

    @property
    def mean_complexity(self) -> float:
        # Directory placeholders count towards the denominator.
        if not self.records:
            return 0.0
        return sum(record.complexity for record in self.records) / len(self.records)

    @property
    def labels(self) -> List[str]:
        return [record.label for record in self.records]

    @property
    def parents(self) -> List[str]:
        return [record.parent for record in self.records]

    @property
    def values(self) -> List[int]:
        return [record.nloc for record in self.records]

    @property
    def colors(self) -> List[int]:
        return [record.complexity for record in self.records]
