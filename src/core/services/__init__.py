"""Casos de uso y wiring de la aplicación."""
