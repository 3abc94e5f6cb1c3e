import abc
import time
from typing import Dict, Any, Optional

class BaseComponent(metaclass=abc.ABCMeta):
    """
    监控组件的基类

    提供组件生命周期（启动/停止）、周期计数和状态查询功能
    """

    def __init__(self):
        self._is_running = False  # 组件运行状态
        self._start_time: Optional[float] = None
        self._cycle_count = 0     # 已完成的监控周期数
        self._error_count = 0
        self._last_error: Optional[Dict[str, Any]] = None

    @property
    def is_running(self) -> bool:
        """返回组件是否正在运行"""
        return self._is_running

    @property
    def cycle_count(self) -> int:
        return self._cycle_count

    def start(self) -> None:
        """标记组件进入运行状态"""
        if self._is_running:
            return

        self._is_running = True
        self._start_time = time.time()

    def stop(self) -> None:
        """标记组件退出运行状态"""
        self._is_running = False

    def mark_cycle(self) -> None:
        self._cycle_count += 1

    def record_error(self, error: Exception) -> None:
        """记录组件错误"""
        self._error_count += 1
        self._last_error = {
            "message": str(error),
            "timestamp": time.time(),
            "type": error.__class__.__name__
        }

    @abc.abstractmethod
    def run_cycle(self) -> None:
        """执行一个完整的监控周期"""

    def get_status(self) -> Dict[str, Any]:
        """
        获取组件状态信息

        返回:
            包含组件状态的字典
        """
        uptime = None
        if self._is_running and self._start_time:
            uptime = time.time() - self._start_time

        return {
            "is_running": self._is_running,
            "start_time": self._start_time,
            "uptime": uptime,
            "cycle_count": self._cycle_count,
            "error_count": self._error_count,
            "last_error": self._last_error,
            "component_type": self.__class__.__name__
        }

    def __str__(self) -> str:
        status = "运行中" if self._is_running else "已停止"
        return f"{self.__class__.__name__} ({status})"
