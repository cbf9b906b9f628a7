from fastapi import APIRouter

from app.api.codes import router as codes_router
from app.api.health import router as health_router
from app.api.reviews import router as reviews_router
from app.api.stats import router as stats_router

api_router = APIRouter(prefix="/api")
api_router.include_router(health_router)
api_router.include_router(codes_router)
api_router.include_router(reviews_router)
api_router.include_router(stats_router)
