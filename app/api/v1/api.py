from fastapi import APIRouter

from app.api.v1.routes import auth, categories, currencies, health, records, users

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(categories.router)
api_router.include_router(currencies.router)
api_router.include_router(records.router)
