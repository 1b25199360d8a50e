"""
Test data builders using the Builder pattern.

Provides fluent interfaces for constructing CCR response envelopes with
sensible defaults.
"""

from typing import Any

from app.clients.ccr import CcrOperation

TOKEN_URL = "https://ccr.test/Token/authenticate"
TOKEN_VALUE = "eyJhbGciOiJIUzI1NiJ9.ccr-session-token"


class EnvelopeBuilder:
    """Builder for the result object of a CCR operation."""

    def __init__(self):
        self._data: dict[str, Any] = {
            "CodRespuesta": "00",
            "MensajeRespuesta": "Proceso exitoso",
        }

    def failed(self, code: str = "01", message: str = "Error") -> "EnvelopeBuilder":
        """Set a non-success response code and message."""
        self._data["CodRespuesta"] = code
        self._data["MensajeRespuesta"] = message
        return self

    def with_field(self, name: str, value: Any) -> "EnvelopeBuilder":
        """Add an operation-specific payload field."""
        self._data[name] = value
        return self

    def with_geographic_items(self, container: str, *items: tuple[str, str]) -> "EnvelopeBuilder":
        """Set a Provincias/Cantones/Distritos container from (code, description) pairs."""
        self._data[container] = {
            "ccrItemGeografico": [{"Codigo": code, "Descripcion": description} for code, description in items]
        }
        return self

    def with_neighborhoods(self, *items: tuple[str, str, str]) -> "EnvelopeBuilder":
        """Set the Barrios container from (code, branch, name) triples."""
        self._data["Barrios"] = {
            "ccrBarrio": [
                {"CodBarrio": code, "CodSucursal": branch, "Nombre": name} for code, branch, name in items
            ]
        }
        return self

    def build(self) -> dict[str, Any]:
        """Build and return the envelope."""
        return self._data.copy()

    def response_for(self, operation: CcrOperation) -> dict[str, Any]:
        """Wrap the envelope under the "<operation>Result" key, as the transport returns it."""
        return {operation.result_key: self.build()}


# Convenience functions for quick test data creation


def success_envelope(**fields: Any) -> dict[str, Any]:
    """Create a successful envelope with the given payload fields."""
    builder = EnvelopeBuilder()
    for name, value in fields.items():
        builder.with_field(name, value)
    return builder.build()


def cantons_response(*items: tuple[str, str]) -> dict[str, Any]:
    """Create a ccrCodCanton transport response."""
    return EnvelopeBuilder().with_geographic_items("Cantones", *items).response_for(CcrOperation.CANTONS)
