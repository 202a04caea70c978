"""Command-line interface for Zesty Dispatcher."""
