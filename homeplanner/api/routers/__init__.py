from fastapi import APIRouter

from homeplanner.api.routers import auth, budget, categories, items, suggestions, tags

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(categories.router)
api_router.include_router(items.router)
api_router.include_router(tags.router)
api_router.include_router(budget.router)
api_router.include_router(suggestions.router)
