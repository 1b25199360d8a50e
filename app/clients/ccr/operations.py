"""
Operaciones expuestas por el servicio SOAP de CCR
"""

from enum import Enum


class CcrOperation(str, Enum):
    """Procedimientos remotos soportados, nombrados igual que en el WSDL."""

    PROVINCES = "ccrCodProvincia"
    CANTONS = "ccrCodCanton"
    DISTRICTS = "ccrCodDistrito"
    NEIGHBORHOODS = "ccrCodBarrio"
    POSTAL_CODE = "ccrCodPostal"
    RATE = "ccrTarifa"
    GENERATE_GUIDE = "ccrGenerarGuia"
    REGISTER_SHIPMENT = "ccrRegistroEnvio"
    TRACKING = "ccrMovilTracking"

    @property
    def result_key(self) -> str:
        """Name of the field holding the envelope in the SOAP response."""
        return f"{self.value}Result"
