"""v1 路由汇总."""
from fastapi import APIRouter

from app.apis.v1 import endpoint_docs, endpoint_pdf, endpoint_root

api_router = APIRouter()
api_router.include_router(endpoint_root.router)
api_router.include_router(endpoint_pdf.router)
api_router.include_router(endpoint_docs.router)
