"""Pretty-printer for the AST.

Provides two renderings:

- `PrettyPrinter.print_ast(node, indent, prefix)` renders an AST into a
    readable multi-line tree, for debugging and tests.
- `PrettyPrinter.print_surface(node)` renders a node back into a compact,
    source-like line (`let x = 10`, `return 5`, `foobar`), and
    `print_program` joins those lines for a whole program.

Neither is a serialization format. The surface form re-lexes to equivalent
tokens, but trailing semicolons are not printed.

Examples:
    PrettyPrinter.print_program(program_node)
"""

from __future__ import annotations
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case IntegerNode(value=v):
                lines.append(f"{indent_str}{prefix}Integer({v})")

            case BooleanNode(value=v):
                lines.append(f"{indent_str}{prefix}Boolean({v})")

            case IdentifierNode():
                lines.append(f"{indent_str}{prefix}Identifier({node.name})")

            case LetStatementNode(name=name, value=value):
                lines.append(f"{indent_str}{prefix}Let({name.lexeme})")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case ReturnStatementNode(value=value):
                lines.append(f"{indent_str}{prefix}Return")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case ExpressionStatementNode(expression=expr):
                lines.append(f"{indent_str}{prefix}ExpressionStatement")
                lines.append(PrettyPrinter.print_ast(expr, indent + 2))

            case ProgramNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a compact, surface-syntax-like one-line representation of an AST node."""
        if node is None:
            return ""

        def _p(n: ASTNode) -> str:
            return PrettyPrinter.print_surface(n) if isinstance(n, ASTNode) else str(n)

        match node:
            case IntegerNode(value=v):
                return str(v)
            case BooleanNode(value=v):
                return "true" if v else "false"
            case IdentifierNode():
                return node.name
            case LetStatementNode(name=name, value=value):
                return f"let {name.lexeme} = {_p(value)}"
            case ReturnStatementNode(value=value):
                return f"return {_p(value)}"
            case ExpressionStatementNode(expression=expr):
                return _p(expr)
            case ProgramNode():
                return PrettyPrinter.print_program(node)
            case _:
                s = PrettyPrinter.print_ast(node)
                return " ".join(line.strip() for line in s.splitlines())

    @staticmethod
    def print_program(program: ProgramNode) -> str:
        """Render each statement on its own line."""
        return "\n".join(PrettyPrinter.print_surface(s) for s in program.statements)
