"""Shared FunctionSet the built-in modules register into."""

from funcystr.resolver.registry import FunctionSet

builtin_functions = FunctionSet()
