"""Hessian 2 longs, nulls and list type tags, with Java value and exception types."""

__version__ = "0.1.0"