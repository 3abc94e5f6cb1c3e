# 简易系统监控核心包
__version__ = "1.0.0"

# 导出核心模块和类
"""
简易系统监控核心模块
"""
from sysmon.monitoring.monitor import SystemMonitor
from sysmon.config.config_manager import ConfigManager

__all__ = ["SystemMonitor", "ConfigManager"]
