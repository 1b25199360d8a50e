"""
Endpoints de consulta geográfica del servicio CCR
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_ccr_client, require_param
from app.clients.ccr import CcrClient
from app.models.ccr import GeographicItem, Neighborhood

router = APIRouter()


@router.get("/cantones/{provinceCode}", response_model=list[GeographicItem])
async def get_cantons_by_province_code(
    provinceCode: str,  # noqa: N803
    client: CcrClient = Depends(get_ccr_client),  # noqa: B008
):
    """
    Lista los cantones de una provincia.

    - **provinceCode**: Código de la provincia
    """
    return await client.get_cantons(require_param("provinceCode", provinceCode))


@router.get("/provinces/{code}/{description}", response_model=list[GeographicItem])
async def get_provinces_by_code_and_description(
    code: str,
    description: str,
    client: CcrClient = Depends(get_ccr_client),  # noqa: B008
):
    """
    Lista las provincias que coinciden con el código y la descripción.

    - **code**: Código de la provincia
    - **description**: Descripción de la provincia
    """
    return await client.get_provinces(
        require_param("code", code),
        require_param("description", description),
    )


@router.get("/districts/{provinceCode}/{cantonCode}", response_model=list[GeographicItem])
async def get_districts_by_province_code_and_canton_code(
    provinceCode: str,  # noqa: N803
    cantonCode: str,  # noqa: N803
    client: CcrClient = Depends(get_ccr_client),  # noqa: B008
):
    """Lista los distritos de un cantón."""
    return await client.get_districts(
        require_param("provinceCode", provinceCode),
        require_param("cantonCode", cantonCode),
    )


@router.get("/neighborhoods/{provinceCode}/{cantonCode}/{districtCode}", response_model=list[Neighborhood])
async def get_neighborhoods(
    provinceCode: str,  # noqa: N803
    cantonCode: str,  # noqa: N803
    districtCode: str,  # noqa: N803
    client: CcrClient = Depends(get_ccr_client),  # noqa: B008
):
    """Lista los barrios de un distrito."""
    return await client.get_neighborhoods(
        require_param("provinceCode", provinceCode),
        require_param("cantonCode", cantonCode),
        require_param("districtCode", districtCode),
    )


@router.get("/postalCode/{provinceCode}/{cantonCode}/{districtCode}", response_model=str)
async def get_postal_code(
    provinceCode: str,  # noqa: N803
    cantonCode: str,  # noqa: N803
    districtCode: str,  # noqa: N803
    client: CcrClient = Depends(get_ccr_client),  # noqa: B008
):
    """Obtiene el código postal de un distrito."""
    return await client.get_postal_code(
        require_param("provinceCode", provinceCode),
        require_param("cantonCode", cantonCode),
        require_param("districtCode", districtCode),
    )
