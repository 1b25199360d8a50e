"""
Integración con el servicio SOAP de Correos de Costa Rica (CCR)
"""

from .client import CcrClient, CcrClientFactory
from .dispatcher import CcrDispatcher
from .exceptions import AuthenticationError, CcrError, DomainError, RemoteCallError
from .operations import CcrOperation
from .token_manager import CcrTokenManager, TokenState
from .transport import CcrTransport, ZeepCcrTransport

__all__ = [
    "CcrClient",
    "CcrClientFactory",
    "CcrDispatcher",
    "CcrOperation",
    "CcrTokenManager",
    "TokenState",
    "CcrTransport",
    "ZeepCcrTransport",
    # Errores
    "CcrError",
    "AuthenticationError",
    "RemoteCallError",
    "DomainError",
]
