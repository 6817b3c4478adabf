"""Adaptadores de I/O (HTTP, cache, exportación)."""
