"""Core de cf-services: dominio, contratos, configuración y servicios."""
