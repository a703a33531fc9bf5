"""Casos de uso da aplicação (inputs/outputs, IO via protocolos)."""
