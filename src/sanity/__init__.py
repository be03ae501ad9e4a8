"""Checks a field cache snapshot for wasteful or inconsistent entries."""
