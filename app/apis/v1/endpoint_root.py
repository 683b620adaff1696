"""根路径 API 端点."""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

GREETING = "Hello from HTML to PDF API!"


@router.get(
    "/",
    summary="Root endpoint",
    description="Returns a simple greeting message",
    response_class=PlainTextResponse,
    responses={
        200: {
            "description": "Success",
            "content": {"text/plain": {"schema": {"type": "string", "example": GREETING}}},
        },
    },
)
async def root() -> str:
    return GREETING
