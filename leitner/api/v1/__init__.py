"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from leitner.api.v1.endpoints import review

api_router = APIRouter()

api_router.include_router(review.router)
