"""Logging and configuration shared by the treecopy modules."""
