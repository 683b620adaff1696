"""FastAPI 应用入口."""
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse

from app.apis.v1.router import api_router
from app.core.config import Settings, settings
from app.core.exceptions import HTML_REQUIRED_MESSAGE, CREDENTIALS_MISSING_MESSAGE
from app.core.logging import setup_logging
from app.models.pdf import PdfErrorResponse

logger = logging.getLogger(__name__)

# FastAPI 默认 422 响应相关的组件，网关统一返回 400
_VALIDATION_COMPONENTS = ("HTTPValidationError", "ValidationError")


def check_credentials(config: Settings) -> None:
    """启动时检查 Cloudflare 凭据."""
    if config.cloudflare_configured:
        return
    if config.FAIL_FAST_ON_MISSING_CREDENTIALS:
        raise RuntimeError(CREDENTIALS_MISSING_MESSAGE)
    logger.warning("Cloudflare 凭据未配置，/pdf 请求将返回 500: %s", CREDENTIALS_MISSING_MESSAGE)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求体校验失败时返回与空 HTML 一致的 400 错误."""
    errors = exc.errors()
    logger.warning("请求参数校验失败: %s %s, errors=%s", request.method, request.url.path, errors)

    # 请求体不是合法 JSON 时附带解析错误
    details = None
    for item in errors:
        if item.get("type") == "json_invalid":
            ctx = item.get("ctx") or {}
            details = str(ctx.get("error") or item.get("msg") or "JSON decode error")
            break

    return JSONResponse(
        status_code=400,
        content=PdfErrorResponse(error=HTML_REQUIRED_MESSAGE, details=details).model_dump(exclude_none=True),
    )


def create_app(config: Settings = settings) -> FastAPI:
    """创建 FastAPI 应用，日志在应用启动时初始化."""

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        setup_logging(config)
        check_credentials(config)
        logger.info("%s v%s 启动完成", config.APP_NAME, config.APP_VERSION)
        yield
        logger.info("%s 已关闭", config.APP_NAME)

    application = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        description=config.APP_DESCRIPTION,
        debug=config.DEBUG,
        lifespan=lifespan,
        # 文档路由由 endpoint_docs 提供
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.allow_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(RequestValidationError, request_validation_handler)
    application.include_router(api_router)

    def custom_openapi() -> Dict[str, Any]:
        if application.openapi_schema:
            return application.openapi_schema

        schema = get_openapi(
            title=application.title,
            version=application.version,
            description=application.description,
            routes=application.routes,
        )
        for path_item in schema.get("paths", {}).values():
            for operation in path_item.values():
                responses = operation.get("responses", {})
                responses.pop("422", None)
                # 二进制响应不保留 FastAPI 默认生成的 JSON 内容类型
                for response in responses.values():
                    content = response.get("content", {})
                    if "application/pdf" in content:
                        content.pop("application/json", None)
        components = schema.get("components", {}).get("schemas", {})
        for name in _VALIDATION_COMPONENTS:
            components.pop(name, None)

        application.openapi_schema = schema
        return schema

    application.openapi = custom_openapi  # type: ignore[method-assign]
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    setup_logging(settings)
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
