"""Typed records exchanged between the engine and its callers."""
