from fastapi import APIRouter

from app.api.routes import ccr

api_router = APIRouter()

api_router.include_router(ccr.router, tags=["ccr"])
