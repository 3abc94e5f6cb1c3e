"""
系统监控模块，按固定周期采样CPU使用率和进程内存并显示、记录

包括周期节拍器和纯函数形式的周期输出渲染
"""

from .monitor import SystemMonitor, CycleReport, render_cycle
from .ticker import Ticker

__all__ = ["SystemMonitor", "CycleReport", "render_cycle", "Ticker"]
