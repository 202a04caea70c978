"""Constant tables for Zesty Dispatcher."""
