"""配置管理模块，负责监控配置的加载、管理和保存"""

from .config_manager import ConfigManager

__all__ = ["ConfigManager"]
