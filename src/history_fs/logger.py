"""日志配置模块"""

import logging
import sys
from pathlib import Path

from .config import LOG_LEVEL


def setup_logger(log_file: Path | None = None) -> logging.Logger:
    """配置日志系统（使用 root logger）

    Args:
        log_file: 日志文件路径；为 None 时输出到 stderr

    - 通过环境变量 LOG_LEVEL 控制级别（默认 INFO）
    - 格式：时间戳 | 级别 | 模块 | 消息
    - 库本身不会在 import 时调用，由应用入口负责
    """
    root_logger = logging.getLogger()

    # 避免重复配置
    if root_logger.handlers:
        return root_logger

    root_logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    if log_file is None:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
    else:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file)
    handler.setLevel(root_logger.level)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root_logger.addHandler(handler)

    return root_logger


logger = logging.getLogger("history-fs")
