"""Servicios del Core: decodificación del catálogo y búsqueda de credenciales."""
