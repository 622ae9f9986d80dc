from fastapi import APIRouter

from people_api.api.routes import health, people

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(people.router)
