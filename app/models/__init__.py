"""
Modelos de datos de la aplicación
"""

from .ccr import CcrCredentials, CcrToken, GeographicItem, Neighborhood

__all__ = [
    "CcrCredentials",
    "CcrToken",
    "GeographicItem",
    "Neighborhood",
]
