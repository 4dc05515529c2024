"""Renderers for analysis reports."""

from cyclo.reporting.formatters import format_debug, format_treemap_script

__all__ = ["format_debug", "format_treemap_script"]
