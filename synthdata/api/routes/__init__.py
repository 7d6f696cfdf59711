from fastapi import APIRouter

from synthdata.api.routes import health, training_data

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(training_data.router, prefix="/training-data", tags=["training-data"])
