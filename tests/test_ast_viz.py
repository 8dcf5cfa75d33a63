"""Tests for ast_viz: ensure a Digraph is produced and contains node labels."""

from tests.utils import parse_text
from ast_viz import render_ast_dot


def test_ast_viz_dot_source():
    program = parse_text("let x = 10; return y;")
    src = render_ast_dot(program).source
    assert "Program" in src
    assert '"Let x"' in src
    assert '"Integer 10"' in src
    assert '"Identifier y"' in src
    assert '"stmt[0]"' in src
    assert '"stmt[1]"' in src


def test_ast_viz_one_node_per_ast_node():
    program = parse_text("a; b;")
    src = render_ast_dot(program).source
    # Program, two statements, two identifiers
    assert src.count("->") == 4
    assert "n4" in src
    assert "n5" not in src
