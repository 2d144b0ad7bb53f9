from fastapi import APIRouter

from .endpoints.douban import router as douban_router
from .endpoints.health import router as health_router

api_router = APIRouter()


@api_router.get("/")
async def root():
    return {"message": "Douban proxy is running"}


api_router.include_router(health_router)
api_router.include_router(douban_router)
