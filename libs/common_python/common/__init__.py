"""Shared helpers used by the phonebook service and its jobs."""
