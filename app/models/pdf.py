"""HTML 转 PDF 相关的 Pydantic 数据模型."""
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field

PDF_REQUEST_EXAMPLE = {
    "html": (
        '<html><body><div class="bg-blue-500 text-red-500 p-8 rounded-lg">'
        '<h1 class="text-3xl font-bold">Hello World</h1>'
        '<p class="mt-4">This is styled with Tailwind CSS!</p></div></body></html>'
    ),
}


class PdfRequest(BaseModel):
    """HTML 转 PDF 请求模型."""

    html: str = Field(..., description="HTML content to convert to PDF")

    model_config = {
        "json_schema_extra": {"examples": [PDF_REQUEST_EXAMPLE]},
    }


class PdfErrorResponse(BaseModel):
    """错误响应模型."""

    error: str = Field(..., description="Error message")
    details: Optional[str] = Field(default=None, description="Additional error details")


class FailureKind(str, Enum):
    """转换失败类型."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    UPSTREAM = "upstream"
    UNEXPECTED = "unexpected"


class PdfConversionSuccess(BaseModel):
    """转换成功结果，保存渲染服务返回的原始 PDF 字节."""

    pdf_bytes: bytes = Field(..., min_length=1)


class PdfConversionFailure(BaseModel):
    """转换失败结果."""

    kind: FailureKind
    error: str
    details: Optional[str] = None
    status_code: int = 500

    def to_error_response(self) -> PdfErrorResponse:
        return PdfErrorResponse(error=self.error, details=self.details)


PdfConversionResult = Union[PdfConversionSuccess, PdfConversionFailure]
