"""
Mapeo de respuestas CCR a registros de dominio.

Solo se renombran campos: el orden de los elementos es el que devuelve el
servicio y los valores no se transforman.
"""

from collections.abc import Mapping
from typing import Any

from app.models.ccr import GeographicItem, Neighborhood

GEOGRAPHIC_ITEM_FIELD = "ccrItemGeografico"
NEIGHBORHOOD_FIELD = "ccrBarrio"

PROVINCES_FIELD = "Provincias"
CANTONS_FIELD = "Cantones"
DISTRICTS_FIELD = "Distritos"
NEIGHBORHOODS_FIELD = "Barrios"
POSTAL_CODE_FIELD = "CodPostal"
GUIDE_NUMBER_FIELD = "NumeroEnvio"


def _items(payload: Mapping[str, Any], container: str, item_field: str) -> list[Any]:
    # SOAP serialises an empty sequence as a null container
    wrapper = payload[container]
    if wrapper is None:
        return []
    items = wrapper[item_field]
    if items is None:
        return []
    if isinstance(items, Mapping):
        return [items]
    return list(items)


def map_geographic_items(payload: Mapping[str, Any], container: str) -> list[GeographicItem]:
    """Map a Provincias/Cantones/Distritos payload to geographic items."""
    return [GeographicItem.from_ccr_response(item) for item in _items(payload, container, GEOGRAPHIC_ITEM_FIELD)]


def map_provinces(payload: Mapping[str, Any]) -> list[GeographicItem]:
    return map_geographic_items(payload, PROVINCES_FIELD)


def map_cantons(payload: Mapping[str, Any]) -> list[GeographicItem]:
    return map_geographic_items(payload, CANTONS_FIELD)


def map_districts(payload: Mapping[str, Any]) -> list[GeographicItem]:
    return map_geographic_items(payload, DISTRICTS_FIELD)


def map_neighborhoods(payload: Mapping[str, Any]) -> list[Neighborhood]:
    return [Neighborhood.from_ccr_response(item) for item in _items(payload, NEIGHBORHOODS_FIELD, NEIGHBORHOOD_FIELD)]


def map_postal_code(payload: Mapping[str, Any]) -> str:
    return payload[POSTAL_CODE_FIELD]


def map_guide_number(payload: Mapping[str, Any]) -> int:
    return payload[GUIDE_NUMBER_FIELD]
