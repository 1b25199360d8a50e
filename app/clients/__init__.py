"""
Clientes para APIs externas
"""

from .ccr import CcrClient, CcrClientFactory

__all__ = [
    "CcrClient",
    "CcrClientFactory",
]
