"""
Modelos CCR - Estructuras de datos para el servicio SOAP de Correos de Costa Rica
Responsabilidad: Credenciales, token y registros de dominio expuestos por la API
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CcrCredentials(BaseModel):
    """Credenciales inmutables del cliente CCR"""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str = Field(repr=False)
    user_id: str
    service_id: str
    client_code: str
    soap_url: str
    system_id: str
    token_url: str


@dataclass(frozen=True)
class CcrToken:
    """Bearer token emitido por el endpoint de identidad."""

    value: str
    expires_at: float

    def is_valid(self, now: float | None = None) -> bool:
        current = time.time() if now is None else now
        return bool(self.value) and current < self.expires_at


class CcrBaseModel(BaseModel):
    """Modelo base para los registros que devuelve la API (JSON en camelCase)"""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class GeographicItem(CcrBaseModel):
    """
    Provincia, cantón o distrito.

    Attributes:
        code: Código geográfico (Codigo)
        description: Nombre (Descripcion)
    """

    code: str
    description: str

    @classmethod
    def from_ccr_response(cls, data: dict[str, Any]) -> GeographicItem:
        return cls(code=data["Codigo"], description=data["Descripcion"])


class Neighborhood(CcrBaseModel):
    """
    Barrio de un distrito.

    Attributes:
        neighborhood_code: Código del barrio (CodBarrio)
        branch_code: Sucursal de Correos que lo atiende (CodSucursal)
        name: Nombre del barrio (Nombre)
    """

    neighborhood_code: str
    branch_code: str
    name: str

    @classmethod
    def from_ccr_response(cls, data: dict[str, Any]) -> Neighborhood:
        return cls(
            neighborhood_code=data["CodBarrio"],
            branch_code=data["CodSucursal"],
            name=data["Nombre"],
        )
