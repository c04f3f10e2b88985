"""
API v1 router.
"""
from fastapi import APIRouter

from app.api.v1.endpoints import auth, health, journals, users

# Import router
from app.api.v1.endpoints.import_data import router as import_router

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(import_router)
api_router.include_router(journals.router)
api_router.include_router(health.router)
