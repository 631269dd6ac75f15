"""Command-line interface for InputGuard."""
