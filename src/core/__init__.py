"""Core: dominio, contratos y casos de uso (sin I/O directo)."""
