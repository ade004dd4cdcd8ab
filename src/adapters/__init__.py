"""Adaptadores de I/O (HTTP, disco).

El Core solo conoce `core.interfaces`; aquí viven las implementaciones.
"""
