"""
中央日志配置

提供统一的 logger 和日志配置入口，默认只输出到 stderr。
"""

import sys
from pathlib import Path

from loguru import logger


def configure_logging(level: str = "INFO", log_file: Path | str | None = None) -> None:
    """重新配置 logger

    Args:
        level: stderr 输出的最低级别
        log_file: 额外写入的日志文件（可选），按 10 MB 轮转，保留 7 天
    """
    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            rotation="10 MB",
            retention="7 days",
            level="DEBUG",
        )


__all__ = ["logger", "configure_logging"]
