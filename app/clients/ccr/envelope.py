"""
Validación del sobre de respuesta CCR.

Todas las operaciones devuelven CodRespuesta / MensajeRespuesta junto a los
campos propios de cada operación.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from .exceptions import DomainError

SUCCESS_CODE = "00"
RESPONSE_CODE_FIELD = "CodRespuesta"
RESPONSE_MESSAGE_FIELD = "MensajeRespuesta"

EnvelopeT = TypeVar("EnvelopeT", bound=Mapping[str, Any])


def validate_envelope(raw: EnvelopeT) -> EnvelopeT:
    """
    Check the response code of an envelope.

    Args:
        raw: Result object of a SOAP operation

    Returns:
        The same object, unchanged

    Raises:
        DomainError: If CodRespuesta is not "00", with MensajeRespuesta verbatim
    """
    response_code = raw.get(RESPONSE_CODE_FIELD)
    if response_code != SUCCESS_CODE:
        raise DomainError(str(raw.get(RESPONSE_MESSAGE_FIELD) or ""), response_code=response_code)
    return raw
