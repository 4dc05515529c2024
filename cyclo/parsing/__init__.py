"""Syntax tree provider."""
