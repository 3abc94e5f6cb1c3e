"""
工具模块，提供日志和控制台输出等通用功能
"""

from .logger import (
    get_logger,
    setup_logging,
    build_log_path,
    MonitorLog
)
from .console import (
    print_success,
    print_error,
    clear_screen
)

__all__ = [
    "get_logger",
    "setup_logging",
    "build_log_path",
    "MonitorLog",
    "print_success",
    "print_error",
    "clear_screen"
]
