"""API 文档端点 - OpenAPI 文档与 Swagger UI."""
from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse

router = APIRouter()

OPENAPI_PATH = "/doc"


def current_server_url(request: Request) -> str:
    """根据当前请求地址计算服务根 URL."""
    url = request.url
    return f"{url.scheme}://{url.netloc}"


@router.get(OPENAPI_PATH, include_in_schema=False)
async def openapi_document(request: Request) -> JSONResponse:
    """返回 OpenAPI 文档，servers 指向当前访问地址."""
    document: Dict[str, Any] = dict(request.app.openapi())
    document["servers"] = [
        {"url": current_server_url(request), "description": "Current server"},
    ]
    return JSONResponse(document)


@router.get("/swagger-ui", include_in_schema=False)
async def swagger_ui(request: Request) -> HTMLResponse:
    return get_swagger_ui_html(openapi_url=OPENAPI_PATH, title=f"{request.app.title} - Swagger UI")
