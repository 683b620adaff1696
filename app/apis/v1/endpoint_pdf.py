"""HTML 转 PDF API 端点."""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from app.apis.deps import get_pdf_service
from app.models.pdf import (
    PdfConversionResult,
    PdfConversionSuccess,
    PdfErrorResponse,
    PdfRequest,
)
from app.services.pdf_service import PdfService

logger = logging.getLogger(__name__)

router = APIRouter()

PDF_FILENAME = "generated.pdf"
CONTENT_DISPOSITION = f'attachment; filename="{PDF_FILENAME}"'


class PdfResponse(Response):
    """PDF 二进制响应."""

    media_type = "application/pdf"


PDF_RESPONSES = {
    200: {
        "description": "PDF file generated successfully",
        "content": {
            "application/pdf": {
                "schema": {"type": "string", "format": "binary"},
            },
        },
        "headers": {
            "Content-Disposition": {
                "description": "PDF file attachment header",
                "schema": {"type": "string", "example": CONTENT_DISPOSITION},
            },
        },
    },
    400: {"model": PdfErrorResponse, "description": "Bad Request - HTML content is missing"},
    500: {"model": PdfErrorResponse, "description": "Internal Server Error"},
}


def build_pdf_response(result: PdfConversionResult) -> Response:
    """将转换结果映射为 HTTP 响应."""
    if isinstance(result, PdfConversionSuccess):
        return PdfResponse(
            content=result.pdf_bytes,
            headers={"Content-Disposition": CONTENT_DISPOSITION},
        )
    return JSONResponse(
        status_code=result.status_code,
        content=result.to_error_response().model_dump(exclude_none=True),
    )


@router.post(
    "/pdf",
    summary="Generate PDF from HTML",
    description=(
        "Converts HTML content to PDF using Cloudflare Browser Rendering API. "
        "Supports Tailwind CSS classes - they will be automatically processed during PDF generation."
    ),
    responses=PDF_RESPONSES,
    tags=["PDF"],
)
async def generate_pdf(
    request_data: PdfRequest,
    service: PdfService = Depends(get_pdf_service),
) -> Response:
    """
    将 HTML 转换为 PDF 文件并以附件形式返回.

    Args:
        request_data: 包含 HTML 内容的请求对象
        service: HTML 转 PDF 服务（通过依赖注入）

    Returns:
        Response: 成功时为 PDF 二进制，失败时为 JSON 错误对象
    """
    result = await service.convert(request_data.html)
    return build_pdf_response(result)
