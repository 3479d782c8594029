from fastapi import APIRouter, Depends

from app.api.endpoints import auth, cars, health, reports, users
from app.core.security import records_auth

# Create API router
api_router = APIRouter()

# Include endpoint routers with appropriate prefixes and tags
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

records_dependencies = [Depends(records_auth)]
api_router.include_router(users.router, prefix="/users", tags=["users"], dependencies=records_dependencies)
api_router.include_router(cars.router, prefix="/cars", tags=["cars"], dependencies=records_dependencies)
api_router.include_router(reports.router, prefix="/reports", tags=["reports"], dependencies=records_dependencies)
