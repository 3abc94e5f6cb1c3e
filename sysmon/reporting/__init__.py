"""内存占用排行模块"""

from .top_processes import top_by_memory, format_process_line

__all__ = ["top_by_memory", "format_process_line"]
