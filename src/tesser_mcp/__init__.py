"""Tesser FX client code generation tools served over MCP."""

__version__ = "0.1.0"
