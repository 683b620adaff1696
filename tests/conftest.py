"""测试公共夹具."""
from typing import AsyncIterator, Callable, Iterator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.apis.deps import get_pdf_service
from app.main import app
from app.services.browser_rendering_client import BrowserRenderingClient
from app.services.pdf_service import PdfService

ACCOUNT_ID = "test-account"
API_TOKEN = "test-token"
API_BASE = "https://api.cloudflare.com/client/v4"
SCRIPT_URL = "https://cdn.jsdelivr.net/npm/@tailwindcss/browser@4"
PROVIDER_URL = f"{API_BASE}/accounts/{ACCOUNT_ID}/browser-rendering/pdf"
PDF_BYTES = b"%PDF-1.7\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<<>>\nendobj\n%%EOF\n"


@pytest.fixture
def rendering_client() -> BrowserRenderingClient:
    return BrowserRenderingClient(api_base=API_BASE, script_url=SCRIPT_URL, timeout=5)


@pytest.fixture
def pdf_service(rendering_client: BrowserRenderingClient) -> PdfService:
    """已配置凭据的服务实例."""
    return PdfService(account_id=ACCOUNT_ID, api_token=API_TOKEN, client=rendering_client)


@pytest.fixture
def use_service() -> Iterator[Callable[[PdfService], None]]:
    """替换 /pdf 端点使用的服务实例，测试结束后恢复."""

    def _override(service: PdfService) -> None:
        app.dependency_overrides[get_pdf_service] = lambda: service

    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
async def client(
    pdf_service: PdfService, use_service: Callable[[PdfService], None]
) -> AsyncIterator[AsyncClient]:
    """以进程内方式访问应用的 HTTP 客户端."""
    use_service(pdf_service)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client


def provider_error(status_code: int, message: str, code: int = 1000) -> httpx.Response:
    return httpx.Response(
        status_code,
        json={"success": False, "errors": [{"code": code, "message": message}], "messages": [], "result": None},
    )
