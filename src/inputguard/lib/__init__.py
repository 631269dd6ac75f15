"""Shared library code for InputGuard: validators, errors and logging."""
