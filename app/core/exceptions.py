"""PDF 网关错误类型."""
from typing import Optional

from app.models.pdf import FailureKind

HTML_REQUIRED_MESSAGE = "HTML content is required in the request body"
CREDENTIALS_MISSING_MESSAGE = (
    "Cloudflare credentials not configured. Please set CLOUDFLARE_ACCOUNT_ID "
    "and CLOUDFLARE_API_TOKEN environment variables."
)
UPSTREAM_FAILED_MESSAGE = "Failed to generate PDF from Cloudflare API"
UNEXPECTED_FAILED_MESSAGE = "Failed to generate PDF"


class PdfGatewayError(Exception):
    """网关错误基类，携带对外返回的状态码与消息."""

    kind: FailureKind = FailureKind.UNEXPECTED
    status_code: int = 500

    def __init__(self, error: str, details: Optional[str] = None) -> None:
        super().__init__(error if details is None else f"{error}: {details}")
        self.error = error
        self.details = details


class PdfValidationError(PdfGatewayError):
    """请求中没有可用的 HTML 内容."""

    kind = FailureKind.VALIDATION
    status_code = 400

    def __init__(self, error: str = HTML_REQUIRED_MESSAGE) -> None:
        super().__init__(error)


class ConfigurationError(PdfGatewayError):
    """部署缺少 Cloudflare 凭据."""

    kind = FailureKind.CONFIGURATION

    def __init__(self, error: str = CREDENTIALS_MISSING_MESSAGE) -> None:
        super().__init__(error)


class UpstreamError(PdfGatewayError):
    """渲染服务拒绝或未能完成请求."""

    kind = FailureKind.UPSTREAM

    def __init__(self, details: Optional[str] = None, provider_status: Optional[int] = None) -> None:
        super().__init__(UPSTREAM_FAILED_MESSAGE, details)
        self.provider_status = provider_status
