from __future__ import annotations

import json
from typing import Dict, Sequence

from cyclo.core.errors import RecordSetMismatch
from cyclo.core.records import AnalysisReport


TREEMAP_TEMPLATE = """
var {variable} = [{{
        type: "treemap",
        values: {values},
        labels: {labels},
        parents: {parents},
        marker: {{colors: {colors}, cmid: {cmid:.2f}, colorscale: {colorscale}}}
}}]
"""


def check_lengths(columns: Dict[str, Sequence]) -> None:
    lengths = {name: len(column) for name, column in columns.items()}
    if len(set(lengths.values())) > 1:
        raise RecordSetMismatch(lengths)


def format_treemap_script(
    report: AnalysisReport,
    variable: str = "jsondata",
    colorscale: str = "Greens",
) -> str:
    columns = {
        "values": report.values,
        "labels": report.labels,
        "parents": report.parents,
        "colors": report.colors,
    }
    check_lengths(columns)
    return TREEMAP_TEMPLATE.format(
        variable=variable,
        values=_dump(columns["values"]),
        labels=_dump(columns["labels"]),
        parents=_dump(columns["parents"]),
        colors=_dump(columns["colors"]),
        cmid=report.mean_complexity,
        colorscale=_dump(colorscale),
    )


def format_debug(report: AnalysisReport) -> str:
    lines = [
        f"file: {_dump(record.label)}, nloc: {record.nloc}, cc: {record.complexity}"
        for record in report.records
    ]
    return "\n".join(lines) + ("\n" if lines else "")


def _dump(value) -> str:
    return json.dumps(value, ensure_ascii=False)
