"""Servicio de reservas de renta de autos."""

__version__ = "0.1.0"
