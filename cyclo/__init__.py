"""
cyclo

Per-file cyclomatic complexity and line counts for C/C++ source trees,
rendered as a treemap dataset.
"""

__version__ = "0.1.0"

from cyclo.core.engine import AnalysisEngine
from cyclo.core.records import AnalysisReport, FileRecord
from cyclo.core.config import Config

__all__ = [
    "AnalysisEngine",
    "AnalysisReport",
    "FileRecord",
    "Config",
]
