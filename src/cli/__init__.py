"""Shell de presentación (Typer + Rich).

Solo invoca `RequestCoordinator.run` y pinta el resultado; no conoce sesiones
ni decoder.
"""
