"""Matrices, qudit operators, basis discovery and diagnostics for quantum system simulations."""

__version__ = "0.1.0"
__all__ = ["config", "matrix", "operators", "graph", "diagnostics"]