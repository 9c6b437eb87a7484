"""Phonebook API service."""
