"""日志配置."""
import logging

from app.core.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: Settings) -> None:
    """根据配置初始化根日志记录器."""
    level_name = "DEBUG" if config.DEBUG else config.LOG_LEVEL.upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)

    # httpx 默认会在 INFO 级别记录每个请求，降低噪音
    logging.getLogger("httpx").setLevel(logging.WARNING)
