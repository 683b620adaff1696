"""Cloudflare Browser Rendering 客户端 - 调用 PDF 生成接口."""
from typing import Any, Dict, List, Optional

import httpx
import logging

from app.core.config import settings
from app.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


def extract_error_details(response: httpx.Response) -> str:
    """
    从 Cloudflare 的错误响应中提取错误信息.

    Cloudflare API 的错误响应一般为
    ``{"success": false, "errors": [{"code": 1000, "message": "..."}]}``，
    无法解析时退化为原始响应文本。

    Args:
        response: 渲染服务返回的非 2xx 响应

    Returns:
        str: 错误详情
    """
    text = response.text
    try:
        data = response.json()
    except ValueError:
        return text

    if isinstance(data, dict):
        errors = data.get("errors")
        if isinstance(errors, list):
            messages: List[str] = []
            for item in errors:
                if isinstance(item, dict) and item.get("message"):
                    code = item.get("code")
                    messages.append(f"[{code}] {item['message']}" if code is not None else str(item["message"]))
            if messages:
                return "; ".join(messages)
    return text


class BrowserRenderingClient:
    """Cloudflare Browser Rendering PDF 接口客户端."""

    def __init__(
        self,
        api_base: Optional[str] = None,
        script_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """初始化客户端."""
        self._api_base = (api_base or settings.CLOUDFLARE_API_BASE).rstrip("/")
        self._script_url = script_url or settings.TAILWIND_SCRIPT_URL
        self._timeout = timeout if timeout is not None else settings.TIMEOUT

    def build_url(self, account_id: str) -> str:
        return f"{self._api_base}/accounts/{account_id}/browser-rendering/pdf"

    def build_payload(self, html: str) -> Dict[str, Any]:
        """构建渲染请求体：注入 Tailwind 脚本并打印背景色."""
        return {
            "html": html,
            "addScriptTag": [{"url": self._script_url}],
            "pdfOptions": {"printBackground": True},
        }

    async def create_pdf(self, html: str, *, account_id: str, api_token: str) -> bytes:
        """
        调用渲染服务生成 PDF.

        Args:
            html: 原样转发的 HTML 内容
            account_id: Cloudflare 账号 ID
            api_token: Cloudflare API Token

        Returns:
            bytes: 渲染服务返回的 PDF 二进制内容

        Raises:
            UpstreamError: 渲染服务返回非 2xx 或空响应
            httpx.HTTPError: 网络错误或超时
        """
        url = self.build_url(account_id)
        headers = {
            "Authorization": f"Bearer {api_token}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.post(url, headers=headers, json=self.build_payload(html))

        if not response.is_success:
            details = extract_error_details(response)
            logger.error("Cloudflare API 错误: status=%s, details=%s", response.status_code, details)
            raise UpstreamError(details=details, provider_status=response.status_code)

        if not response.content:
            logger.error("Cloudflare API 返回空的 PDF 内容")
            raise UpstreamError(details="Empty PDF returned by rendering service", provider_status=response.status_code)

        return response.content
