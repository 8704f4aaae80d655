"""Route registration."""

from fastapi import APIRouter

from shs.api.routes import index

api_router = APIRouter()

api_router.include_router(index.router, tags=["index"])
