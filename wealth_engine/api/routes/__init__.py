"""Route registration helpers."""

from __future__ import annotations

from fastapi import APIRouter

from .planning import router as planning_router
from .portfolio import router as portfolio_router
from .projection import router as projection_router
from .spending import router as spending_router

api_router = APIRouter()
api_router.include_router(projection_router, prefix="/analytics", tags=["projection"])
api_router.include_router(portfolio_router, prefix="/analytics", tags=["portfolio"])
api_router.include_router(spending_router, prefix="/analytics", tags=["spending"])
api_router.include_router(planning_router, prefix="/analytics", tags=["planning"])

__all__ = ["api_router"]
