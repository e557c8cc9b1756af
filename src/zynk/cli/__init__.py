"""
Zynk Command-Line Interface
===========================

- **zynkc**: Zynk to C++ compiler

The tool is a Click-based CLI application with help and error reporting.
"""

__all__ = ["zynkc"]
