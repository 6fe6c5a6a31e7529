from fastapi import APIRouter

from .categories import router as categories_router
from .transactions import router as transactions_router
from .reports import router as reports_router

api_router = APIRouter()

api_router.include_router(categories_router, prefix="/categories", tags=["categories"])
api_router.include_router(reports_router, prefix="/transactions/summary", tags=["summary"])
api_router.include_router(transactions_router, prefix="/transactions", tags=["transactions"])
