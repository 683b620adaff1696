"""HTML 转 PDF 网关服务 - 校验请求并转发给 Cloudflare Browser Rendering."""
from typing import Optional

import httpx
import logging

from app.core.config import settings
from app.core.exceptions import (
    UNEXPECTED_FAILED_MESSAGE,
    ConfigurationError,
    PdfGatewayError,
    PdfValidationError,
)
from app.models.pdf import (
    FailureKind,
    PdfConversionFailure,
    PdfConversionResult,
    PdfConversionSuccess,
)
from app.services.browser_rendering_client import BrowserRenderingClient

logger = logging.getLogger(__name__)


class PdfService:
    """HTML 转 PDF 服务类."""

    def __init__(
        self,
        account_id: Optional[str] = None,
        api_token: Optional[str] = None,
        client: Optional[BrowserRenderingClient] = None,
    ) -> None:
        """初始化服务，未显式传入的凭据从全局配置读取."""
        self._account_id = account_id if account_id is not None else settings.CLOUDFLARE_ACCOUNT_ID
        self._api_token = api_token if api_token is not None else settings.CLOUDFLARE_API_TOKEN
        self._client = client or BrowserRenderingClient()

    @property
    def configured(self) -> bool:
        return bool(self._account_id and self._api_token)

    async def render(self, html: Optional[str]) -> bytes:
        """
        将 HTML 转换为 PDF.

        Args:
            html: 请求中的 HTML 内容

        Returns:
            bytes: PDF 二进制内容

        Raises:
            PdfValidationError: HTML 缺失或为空
            ConfigurationError: Cloudflare 凭据未配置
            UpstreamError: 渲染服务返回错误
        """
        if not isinstance(html, str) or not html:
            raise PdfValidationError()

        if not self.configured:
            raise ConfigurationError()

        logger.info("开始进行 HTML 转 PDF, HTML 长度: %d", len(html))
        pdf_bytes = await self._client.create_pdf(
            html,
            account_id=self._account_id,
            api_token=self._api_token,
        )
        logger.info("HTML 已成功转换为 PDF, 大小: %d 字节", len(pdf_bytes))
        return pdf_bytes

    async def convert(self, html: Optional[str]) -> PdfConversionResult:
        """
        转换 HTML 并把所有错误收敛为失败结果，不向外抛出异常.

        Args:
            html: 请求中的 HTML 内容

        Returns:
            PdfConversionResult: 成功时包含 PDF 字节，失败时包含错误类型与消息
        """
        try:
            return PdfConversionSuccess(pdf_bytes=await self.render(html))
        except PdfGatewayError as e:
            if e.kind is FailureKind.CONFIGURATION:
                logger.error("Cloudflare 凭据未配置，无法生成 PDF")
            elif e.kind is not FailureKind.VALIDATION:
                logger.error("生成 PDF 失败: %s", e)
            return PdfConversionFailure(
                kind=e.kind,
                error=e.error,
                details=e.details,
                status_code=e.status_code,
            )
        except httpx.HTTPError as e:
            logger.error("请求 Cloudflare API 失败: %s", e, exc_info=True)
            return PdfConversionFailure(
                kind=FailureKind.UNEXPECTED,
                error=UNEXPECTED_FAILED_MESSAGE,
                details=str(e) or e.__class__.__name__,
            )
        except Exception as e:
            logger.error("生成 PDF 时发生未知错误: %s", e, exc_info=True)
            return PdfConversionFailure(
                kind=FailureKind.UNEXPECTED,
                error=UNEXPECTED_FAILED_MESSAGE,
                details=str(e) or "Unknown error",
            )


# 创建全局服务实例
pdf_service = PdfService()
