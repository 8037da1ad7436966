# calcfrete/api/api.py
from fastapi import APIRouter

from calcfrete.api.routers import freight

api_router = APIRouter()

api_router.include_router(freight.router)
