"""Shared utilities: configuration, error handling and locking."""
