"""
Capa de Infraestructura - Renta de autos.

Estructura:
- in_memory/: repositorios, unidad de trabajo y locks en memoria
- db/: tablas, repositorios y transacciones con SQLAlchemy async
- seed.py: datos de demostración
"""
