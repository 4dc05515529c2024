"""
Tests for the complexity engine.
"""

import pytest
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cyclo.analysis.complexity import (
    compute_block_complexity,
    compute_file_complexity,
    compute_function_complexity,
)
from cyclo.parsing.treesitter import C_SPEC, CPP_SPEC, Language, parse_source


class Node:
    """Minimal stand-in for a syntax tree node."""

    def __init__(self, type, *children):
        self.type = type
        self.children = list(children)


def block(*children):
    return Node("compound_statement", Node("{"), *children, Node("}"))


def condition(*children):
    return Node("parenthesized_expression", Node("("), *children, Node(")"))


def binary(left, operator, right):
    return Node("binary_expression", left, Node(operator), right)


def function(body):
    return Node(
        "function_definition",
        Node("primitive_type"),
        Node("function_declarator"),
        body,
    )


def c_complexity(code):
    parsed = parse_source(code.encode("utf-8"), Language.C)
    return compute_file_complexity(parsed.root_node, parsed.spec)


def cpp_complexity(code):
    parsed = parse_source(code.encode("utf-8"), Language.CPP)
    return compute_file_complexity(parsed.root_node, parsed.spec)


class TestBlockComplexity:
    """Tests against hand-built trees, no parsing involved."""

    def test_empty_block(self):
        """A block without statements scores 0."""
        assert compute_block_complexity(block()) == 0

    def test_plain_statements(self):
        """Statements that do not branch add nothing."""
        body = block(Node("expression_statement"), Node("return_statement"))
        assert compute_function_complexity(function(body)) == 0

    def test_each_decision_kind_counts_once(self):
        """if, for, while, switch, break and goto each add one."""
        kinds = [
            "if_statement",
            "for_statement",
            "while_statement",
            "switch_statement",
            "break_statement",
            "goto_statement",
        ]
        body = block(*[Node(kind) for kind in kinds])
        assert compute_block_complexity(body) == len(kinds)

    def test_other_statements_do_not_count(self):
        """do/while, case and return are not decision statements."""
        body = block(Node("do_statement"), Node("case_statement"), Node("return_statement"))
        assert compute_block_complexity(body) == 0

    def test_short_circuit_in_condition(self):
        """An if with `a && b` scores 2."""
        cond = condition(binary(Node("identifier"), "&&", Node("identifier")))
        body = block(Node("if_statement", Node("if"), cond, block()))
        assert compute_function_complexity(function(body)) == 2

    def test_non_boolean_operator_ignored(self):
        """Only && and || are short-circuit operators."""
        cond = condition(binary(Node("identifier"), "<", Node("identifier")))
        body = block(Node("while_statement", Node("while"), cond, block()))
        assert compute_block_complexity(body) == 1

    def test_nested_block_recursion(self):
        """An if containing a for scores 2."""
        inner = block(Node("for_statement", Node("for"), block()))
        body = block(Node("if_statement", Node("if"), condition(Node("identifier")), inner))
        assert compute_function_complexity(function(body)) == 2

    def test_deeper_operators_not_counted(self):
        """Operators below the first binary expression are not seen."""
        nested = condition(binary(Node("identifier"), "||", Node("identifier")))
        cond = condition(binary(Node("identifier"), "&&", nested))
        body = block(Node("if_statement", Node("if"), cond, block()))
        assert compute_block_complexity(body) == 2

    def test_else_clause_is_transparent(self):
        """Blocks wrapped in else_clause are still recursed into."""
        else_body = block(Node("while_statement", Node("while"), block()))
        statement = Node(
            "if_statement",
            Node("if"),
            condition(Node("identifier")),
            block(),
            Node("else_clause", Node("else"), else_body),
        )
        assert compute_block_complexity(block(statement)) == 2

    def test_condition_clause_only_for_cpp(self):
        """The C++ condition wrapper is a condition only under the C++ spec."""
        cond = Node(
            "condition_clause",
            Node("("),
            binary(Node("identifier"), "||", Node("identifier")),
            Node(")"),
        )
        body = block(Node("if_statement", Node("if"), cond, block()))
        assert compute_block_complexity(body, CPP_SPEC) == 2
        assert compute_block_complexity(body, C_SPEC) == 1

    def test_function_without_body(self):
        """A function node without a compound statement scores 0."""
        assert compute_function_complexity(Node("function_definition", Node("identifier"))) == 0

    def test_idempotent(self):
        """Running the engine twice on the same tree gives the same value."""
        cond = condition(binary(Node("identifier"), "&&", Node("identifier")))
        tree = function(block(Node("if_statement", Node("if"), cond, block(Node("break_statement")))))
        assert compute_function_complexity(tree) == compute_function_complexity(tree) == 3


class TestCComplexity:
    """Tests on trees produced by the C grammar."""

    def test_no_decisions(self):
        assert c_complexity("int f(int a) { return a + 1; }") == 0

    def test_if_with_and(self):
        code = "void f(int a, int b) { if (a && b) { g(); } }"
        assert c_complexity(code) == 2

    def test_if_containing_for(self):
        code = "void f(int n) { if (n) { for (int i = 0; i < n; i++) { g(i); } } }"
        assert c_complexity(code) == 2

    def test_while_with_or_inside_if(self):
        code = "void f(){ if (x) { while(y || z) { } } }"
        assert c_complexity(code) == 3

    def test_break_inside_loop(self):
        code = "void f(int a) { while (a) { if (a > 3) { break; } a--; } }"
        assert c_complexity(code) == 3

    def test_else_body_is_counted(self):
        code = "void f(int a) { if (a) { g(); } else { while (a) { a--; } } }"
        assert c_complexity(code) == 2

    def test_case_bodies_are_not_blocks(self):
        """Statements directly under a case label are not visited."""
        code = "void f(int a) { switch (a) { case 1: g(); break; default: break; } }"
        assert c_complexity(code) == 1

    def test_nested_operator_not_counted(self):
        code = "void f(int a, int b, int c) { if (a && (b || c)) { g(); } }"
        assert c_complexity(code) == 2

    def test_operator_in_call_not_counted(self):
        code = "void f(int a, int b) { if (check(a && b)) { g(); } }"
        assert c_complexity(code) == 1

    def test_sum_over_functions(self):
        code = """
int first(int a) { if (a) { return 1; } return 0; }
int second(int a) { while (a) { a--; } return a; }
"""
        assert c_complexity(code) == 2

    def test_empty_source(self):
        assert c_complexity("") == 0

    def test_no_functions(self):
        assert c_complexity("int counter = 1;\nstatic const char *name = \"x\";\n") == 0


class TestCppComplexity:
    """Tests on trees produced by the C++ grammar."""

    def test_condition_clause_operators(self):
        code = "int f(int a) { if (a || a > 2) { return 1; } return 0; }"
        assert cpp_complexity(code) == 2

    def test_function_in_namespace(self):
        code = "namespace n { int f(int a) { while (a) { a--; } return a; } }"
        assert cpp_complexity(code) == 1

    def test_inline_method(self):
        code = "class A { public: int g(int x) { if (x) { return 1; } return 0; } };"
        assert cpp_complexity(code) == 1

    def test_while_with_or_inside_if(self):
        code = "void f(){ if (x) { while(y || z) { } } }"
        assert cpp_complexity(code) == 3


class TestLanguage:
    """Tests for extension based grammar selection."""

    def test_c_extension(self):
        assert Language.for_path("src/main.c") is Language.C

    @pytest.mark.parametrize("name", ["a.cpp", "a.cc", "a.cxx"])
    def test_cpp_extensions(self, name):
        assert Language.for_path(name) is Language.CPP

    @pytest.mark.parametrize("name", ["a.h", "a.hpp", "a.C", "a.CPP", "a.cs", "a.c.bak", "Makefile"])
    def test_rejected(self, name):
        assert Language.for_path(name) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
