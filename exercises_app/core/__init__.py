"""Dispatcher, selector registry and the HTTP helper."""
