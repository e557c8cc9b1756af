"""
Zynk Statement Tree Definitions
===============================

This module defines the nodes produced by the Zynk parser. A program is
a flat, ordered list of statements; there is no nesting and no symbol
table.

Node Hierarchy
--------------
ASTNode (base)
├── ProgramNode - root node containing all statements
└── Statements
    ├── PrintStatement - print(value, value, ...)
    └── LetStatement - let <name> to <value>

Design Notes
------------
- All nodes are dataclasses for clean representation
- Each node stores its source location for error reporting
- LetStatement keeps the exact key and value tokens taken from the
  token list; tokens are immutable, so sharing them is safe
"""

from dataclasses import dataclass, field
from typing import Optional

from zynk.errors import SourceLocation
from zynk.lexer import LiteralValue, Token


# =============================================================================
# AST Node Base Classes
# =============================================================================

@dataclass
class ASTNode:
    """
    Base class for all nodes.

    Attributes:
        location: Source location where this node appears
    """
    location: SourceLocation = field(compare=False)


@dataclass
class Statement(ASTNode):
    """Base class for all statement nodes."""
    pass


# =============================================================================
# Program Root Node
# =============================================================================

@dataclass
class ProgramNode(ASTNode):
    """
    Root node representing a complete Zynk program.

    Attributes:
        statements: Statements in source order
    """
    statements: list[Statement] = field(default_factory=list)


# =============================================================================
# Statement Nodes
# =============================================================================

@dataclass
class PrintStatement(Statement):
    """
    Print statement: print(value, value, ...)

    Attributes:
        values: Literal values to print, in order (may be empty)
    """
    values: list[LiteralValue] = field(default_factory=list)


@dataclass
class LetStatement(Statement):
    """
    Variable declaration: let <name> to <value>

    Attributes:
        key: The text literal token naming the variable
        value: The literal token holding the initial value
    """
    key: Optional[Token] = None
    value: Optional[Token] = None

    @property
    def name(self) -> str:
        """The declared variable name."""
        return self.key.literal.value


# =============================================================================
# Visitor Pattern
# =============================================================================

class ASTVisitor:
    """
    Base class for statement tree visitors.

    Subclasses override visit_<NodeClass> methods:

        class MyVisitor(ASTVisitor):
            def visit_PrintStatement(self, node):
                ...

        MyVisitor().visit(program)
    """

    def visit(self, node: ASTNode):
        """Dispatch to visit_<NodeClass>, or generic_visit if not defined."""
        method_name = f"visit_{node.__class__.__name__}"
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: ASTNode) -> None:
        """Visit child statements of a program; leaves are ignored."""
        if isinstance(node, ProgramNode):
            for stmt in node.statements:
                self.visit(stmt)


# =============================================================================
# AST Pretty Printer
# =============================================================================

class ASTPrinter(ASTVisitor):
    """
    Pretty printer for debugging.

    Usage:
        printer = ASTPrinter()
        print(printer.print(program))
    """

    def __init__(self):
        self.output: list[str] = []
        self.indent_level = 0

    def print(self, node: ASTNode) -> str:
        """Print the tree and return it as a string."""
        self.output = []
        self.indent_level = 0
        self.visit(node)
        return "\n".join(self.output)

    def _emit(self, text: str) -> None:
        indent = "  " * self.indent_level
        self.output.append(f"{indent}{text}")

    def visit_ProgramNode(self, node: ProgramNode):
        self._emit("Program")
        self.indent_level += 1
        for stmt in node.statements:
            self.visit(stmt)
        self.indent_level -= 1

    def visit_PrintStatement(self, node: PrintStatement):
        values = ", ".join(repr(v) for v in node.values)
        self._emit(f"Print({values})")

    def visit_LetStatement(self, node: LetStatement):
        self._emit(f"Let {node.name} = {node.value.literal!r}")
