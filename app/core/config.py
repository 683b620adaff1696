"""应用配置管理 - 环境变量和 Cloudflare 凭据."""
from pathlib import Path
from pydantic_settings import BaseSettings
from typing import List, Optional


def get_project_root() -> Path:
    """获取项目根目录."""
    # config.py 在 app/core/ 目录下，向上两级到项目根目录
    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent
    return project_root


class Settings(BaseSettings):
    """应用配置类 - 从环境变量加载配置."""

    # 应用基础配置
    APP_NAME: str = "HTML to PDF API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "API for converting HTML to PDF using Cloudflare Browser Rendering"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # API 服务配置
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Cloudflare Browser Rendering 配置
    CLOUDFLARE_ACCOUNT_ID: Optional[str] = None
    CLOUDFLARE_API_TOKEN: Optional[str] = None
    CLOUDFLARE_API_BASE: str = "https://api.cloudflare.com/client/v4"
    TAILWIND_SCRIPT_URL: str = "https://cdn.jsdelivr.net/npm/@tailwindcss/browser@4"
    FAIL_FAST_ON_MISSING_CREDENTIALS: bool = False  # 启动时缺少凭据直接退出

    # CORS 配置
    ALLOW_ORIGINS: str = "*"  # 允许的域名列表，用逗号分隔

    # 其他配置
    TIMEOUT: int = 60  # 渲染请求超时时间（秒）

    model_config = {
        "env_file": str(get_project_root() / ".env"),
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @property
    def allow_origins_list(self) -> List[str]:
        """解析 CORS 域名列表."""
        return [origin.strip() for origin in self.ALLOW_ORIGINS.split(",") if origin.strip()]

    @property
    def cloudflare_configured(self) -> bool:
        """Cloudflare 账号 ID 与 API Token 是否都已配置."""
        return bool(self.CLOUDFLARE_ACCOUNT_ID and self.CLOUDFLARE_API_TOKEN)


# 创建全局配置实例
settings = Settings()
