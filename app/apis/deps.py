"""API 依赖项."""
from app.services.pdf_service import PdfService, pdf_service


def get_pdf_service() -> PdfService:
    """获取 HTML 转 PDF 服务实例（测试中可通过 dependency_overrides 替换）."""
    return pdf_service
