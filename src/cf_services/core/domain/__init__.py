"""Modelos y entidades del dominio.

Estructuras de datos puras (Pydantic v2): no conocen el entorno del proceso
ni el formato de transporte más allá de los nombres de campo.
"""
