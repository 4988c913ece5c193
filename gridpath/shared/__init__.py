"""Shared infrastructure for gridpath: exceptions, configuration, utilities."""
