"""Complexity engine, line counter and per-file analyzer."""
