"""
进程采样模块，负责读取进程处理器时间、内存并估算整体CPU使用率

单个进程的访问失败只会把该读数降为零，不会中断整个周期
"""

from .process_sampler import (
    ProcessSample,
    Reading,
    list_processes,
    read_cpu_time,
    read_memory_usage,
    safe_cpu_time,
    safe_memory_usage
)
from .cpu_estimator import CpuUsageEstimator, compute_cpu_percent

__all__ = [
    "ProcessSample",
    "Reading",
    "list_processes",
    "read_cpu_time",
    "read_memory_usage",
    "safe_cpu_time",
    "safe_memory_usage",
    "CpuUsageEstimator",
    "compute_cpu_percent"
]
