"""
Cyclomatic complexity of C and C++ syntax trees.

The score reported for a file is the raw number of decision points found in
its function bodies: decision statements plus the ``&&``/``||`` operators of
their conditions. No per-function base of 1 is added, so a file whose
functions never branch scores 0.

Short-circuit operators are only seen one level inside a condition, i.e.
``condition -> binary expression -> operator``. In ``if (a && (b || c))``
the ``||`` is not counted; neither are operators inside call arguments.
"""

from __future__ import annotations

from cyclo.parsing.treesitter import C_SPEC, LanguageSpec, iter_nodes


def compute_block_complexity(block_node, spec: LanguageSpec = C_SPEC) -> int:
    """Count decision points in a compound statement, descending into nested blocks."""
    complexity = 0
    for child in block_node.children:
        if child.type in spec.decision_node_types:
            complexity += 1
        for grandchild in _statement_parts(child, spec):
            if grandchild.type in spec.block_node_types:
                complexity += compute_block_complexity(grandchild, spec)
            elif grandchild.type in spec.condition_node_types:
                complexity += _short_circuit_operators(grandchild, spec)
    return complexity


def compute_function_complexity(function_node, spec: LanguageSpec = C_SPEC) -> int:
    """Return the decision-point count of a function definition's body."""
    return sum(
        compute_block_complexity(child, spec)
        for child in function_node.children
        if child.type in spec.block_node_types
    )


def compute_file_complexity(root_node, spec: LanguageSpec = C_SPEC) -> int:
    """Sum the complexity of every function definition under ``root_node``."""
    return sum(
        compute_function_complexity(node, spec)
        for node in iter_nodes(root_node)
        if node.type in spec.function_node_types
    )


def _statement_parts(statement, spec: LanguageSpec):
    for part in statement.children:
        if part.type in spec.transparent_node_types:
            yield from part.children
        else:
            yield part


def _short_circuit_operators(condition, spec: LanguageSpec) -> int:
    count = 0
    for expression in condition.children:
        if expression.type not in spec.binary_node_types:
            continue
        for token in expression.children:
            if token.type in spec.short_circuit_operators:
                count += 1
    return count
