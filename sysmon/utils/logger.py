import logging
import os
import sys
from datetime import datetime
from typing import Callable, Optional

from sysmon.utils.console import print_error

# 日志格式配置
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 监控记录文件格式：<时间戳>: <消息>
RECORD_FORMAT = "%(asctime)s: %(message)s"
LOG_FILE_PREFIX = "SimpleSystemMonitorLog"
FILENAME_TIME_FORMAT = "%Y%m%d_%H%M%S"

# 所有诊断日志器的根命名空间
ROOT_LOGGER_NAME = "sysmon"


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """获取指定名称的日志器（统一挂在 sysmon 命名空间下）"""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def setup_logging(level: str = "WARNING") -> None:
    """
    设置诊断日志系统

    Args:
        level: 日志级别名称，如 "DEBUG"、"INFO"
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(log_level)

    # 清除已有的处理器（避免重复）
    if root_logger.handlers:
        root_logger.handlers.clear()

    # 控制台处理器
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    # 防止日志传播到 Python 根记录器，避免重复输出
    root_logger.propagate = False


def documents_dir() -> str:
    """返回用户文档目录，不存在时退回到用户主目录"""
    home = os.path.expanduser("~")
    documents = os.path.join(home, "Documents")
    if os.path.isdir(documents):
        return documents
    return home


def build_log_path(
    directory: Optional[str] = None,
    now: Optional[datetime] = None,
    prefix: str = LOG_FILE_PREFIX
) -> str:
    """
    构造监控记录文件路径

    Args:
        directory: 记录文件目录（默认使用用户文档目录）
        now: 文件名使用的时间（默认当前时间）
        prefix: 文件名前缀

    Returns:
        形如 <目录>/SimpleSystemMonitorLog_20240102_030405.txt 的路径
    """
    directory = directory or documents_dir()
    now = now or datetime.now()
    return os.path.join(directory, f"{prefix}_{now.strftime(FILENAME_TIME_FORMAT)}.txt")


class RecordFormatter(logging.Formatter):
    """使用可替换时钟生成时间戳的格式化器"""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        super().__init__(RECORD_FORMAT, datefmt=DATE_FORMAT)
        self.clock = clock

    def formatTime(self, record, datefmt=None):
        if self.clock is None:
            return super().formatTime(record, datefmt)
        return self.clock().strftime(datefmt or DATE_FORMAT)


class AppendFileHandler(logging.FileHandler):
    """
    每条记录独立 打开-写入-关闭 的文件处理器

    写入失败时在控制台报告错误并忽略，不会中断调用方
    """

    def __init__(self, filename: str, encoding: str = "utf-8"):
        super().__init__(filename, mode="a", encoding=encoding, delay=True)
        self._reported = False

    def emit(self, record: logging.LogRecord) -> None:
        self._reported = False
        try:
            super().emit(record)
        except OSError:
            # 打开文件失败发生在 StreamHandler 的异常保护之外
            self.handleError(record)
        finally:
            try:
                # 写入失败（如磁盘已满）后缓冲区仍有数据，关闭时会再次刷新失败
                self.close()
            except OSError:
                if not self._reported:
                    self.handleError(record)
            self.stream = None

    def handleError(self, record: logging.LogRecord) -> None:
        # 每条记录只报告一次
        self._reported = True
        error = sys.exc_info()[1]
        print_error(f"Logging error: {error}")


class MonitorLog:
    """
    监控记录器，向固定路径的文本文件追加带时间戳的行

    路径在启动时确定，之后只读
    """

    def __init__(self, log_path: str, clock: Optional[Callable[[], datetime]] = None):
        self.log_path = log_path

        self._handler = AppendFileHandler(log_path)
        self._handler.setFormatter(RecordFormatter(clock))

        # 独立日志器，不注册到全局管理器，也不向诊断日志传播
        self._logger = logging.Logger(f"{ROOT_LOGGER_NAME}.record", logging.INFO)
        self._logger.addHandler(self._handler)
        self._logger.propagate = False

    def log(self, message: str) -> None:
        """追加一行 "<时间戳>: <消息>" 到记录文件"""
        self._logger.info(message)

    def __str__(self) -> str:
        return f"MonitorLog(log_path={self.log_path})"
