"""
C++ Code Generator for Zynk
===========================

This module generates C++ source text from a parsed Zynk program. Every
statement becomes one line inside a single `main()` entry point, in
source order.

Statement Translation
---------------------
| Zynk                  | C++                               | Include    |
|-----------------------|-----------------------------------|------------|
| print(3, hi)          | std::cout<<3<<hi<<std::endl;      | <iostream> |
| let name to 5         | int name=5;                       | -          |
| let name to value     | std::string name=value;           | <string>   |

Print values are chained with no separator between them. Text values
are written verbatim: they are neither quoted nor escaped, so a text
literal lands in the output as whatever C++ it happens to spell. This is
part of the language's observable behaviour (`print(x)` prints the
variable `x`) and also means generated code is only as valid as the
names used in the source.

Includes
--------
Includes are collected into an ordered set while the body is generated.
Each one is emitted once, in order of first use, ahead of the body.

Usage
-----
>>> from zynk.parser import parse_source
>>> from zynk.codegen import CodeGenerator
>>> gen = CodeGenerator()
>>> print(gen.generate(parse_source('let x to 5 print(x)')))
#include <iostream>
<BLANKLINE>
int main() {
int x=5;
std::cout<<x<<std::endl;
}
"""

import logging
from typing import Optional

from zynk.ast import ASTVisitor, ProgramNode, Statement, PrintStatement, LetStatement
from zynk.lexer import LiteralKind

logger = logging.getLogger(__name__)


# =============================================================================
# Target Constants
# =============================================================================

IOSTREAM_INCLUDE = "<iostream>"
STRING_INCLUDE = "<string>"

OUTPUT_STREAM = "std::cout"
STREAM_OPERATOR = "<<"
LINE_END = "std::endl"


# =============================================================================
# Code Generator Class
# =============================================================================

class CodeGenerator(ASTVisitor):
    """
    Generates C++ source from a Zynk program.

    Attributes:
        includes: Include targets required by the last generated program,
                  in order of first use
    """

    def __init__(self):
        self._output: list[str] = []

        # Ordered set of include targets (dict keys keep insertion order)
        self._includes: dict[str, None] = {}

    @property
    def includes(self) -> list[str]:
        return list(self._includes)

    def generate(self, program: ProgramNode | list[Statement]) -> str:
        """
        Generate C++ source code.

        Args:
            program: The parsed program, or a bare list of statements

        Returns:
            Include directives, a blank line, then the main() body
        """
        if isinstance(program, ProgramNode):
            statements = program.statements
        else:
            statements = program

        self._output = []
        self._includes = {}

        self._emit("int main() {")
        for stmt in statements:
            self.visit(stmt)
        self._output.append("}")

        logger.debug(
            f"Generated {len(statements)} statements, includes: {', '.join(self._includes) or 'none'}"
        )

        return f"{self.render_includes()}\n" + "".join(self._output)

    def render_includes(self) -> str:
        """Render the collected includes as directive lines."""
        return "".join(f"#include {target}\n" for target in self._includes)

    # =========================================================================
    # Output Methods
    # =========================================================================

    def _emit(self, line: str) -> None:
        """Emit one line of C++."""
        self._output.append(f"{line}\n")

    def _include(self, target: str) -> None:
        """Require an include; repeated requests are ignored."""
        if target not in self._includes:
            self._includes[target] = None

    # =========================================================================
    # Statement Generation
    # =========================================================================

    def visit_PrintStatement(self, node: PrintStatement) -> None:
        self._include(IOSTREAM_INCLUDE)

        parts = [OUTPUT_STREAM]
        parts.extend(value.render() for value in node.values)
        parts.append(f"{LINE_END};")
        self._emit(STREAM_OPERATOR.join(parts))

    def visit_LetStatement(self, node: LetStatement) -> None:
        declaration = self._declaration(node)
        if declaration is None:
            logger.debug(f"Skipping let statement with non-literal operands at {node.location}")
            return
        self._emit(declaration)

    def _declaration(self, node: LetStatement) -> Optional[str]:
        """Build the variable declaration for a let statement, if it has one."""
        if node.key is None or not node.key.is_text_literal():
            return None
        if node.value is None or node.value.literal is None:
            return None

        value = node.value.literal
        if value.kind == LiteralKind.TEXT:
            self._include(STRING_INCLUDE)
            return f"std::string {node.name}={value.render()};"

        return f"int {node.name}={value.render()};"


# =============================================================================
# Convenience Functions
# =============================================================================

def generate(statements: ProgramNode | list[Statement]) -> str:
    """Generate C++ source for a program or list of statements."""
    return CodeGenerator().generate(statements)
