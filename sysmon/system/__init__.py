"""
组件基础模块，提供统一的启动、停止和状态查询接口
"""

from .base_component import BaseComponent

__all__ = ["BaseComponent"]
