import json
from tests.utils import parse_text
from ast_json import ast_to_json


def test_ast_to_json_program():
    program = parse_text("let x = 10; return true; y;")
    assert ast_to_json(program) == {
        "node_type": "Program",
        "statements": [
            {
                "node_type": "Let",
                "name": {"token_type": "IDENTIFIER", "value": "x"},
                "value": {"node_type": "Integer", "value": 10},
            },
            {"node_type": "Return", "value": {"node_type": "Boolean", "value": True}},
            {
                "node_type": "ExprStmt",
                "expression": {
                    "node_type": "Identifier",
                    "token": {"token_type": "IDENTIFIER", "value": "y"},
                },
            },
        ],
    }


def test_ast_to_json_is_serializable():
    program = parse_text("let a = b; return 1")
    text = json.dumps(ast_to_json(program))
    assert '"Let"' in text


def test_ast_to_json_none():
    assert ast_to_json(None) is None
