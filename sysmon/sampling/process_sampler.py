from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Tuple

import psutil

from sysmon.utils.logger import get_logger

logger = get_logger(__name__)

BYTES_PER_MB = 1024.0 * 1024.0


class Reading(NamedTuple):
    """单次进程指标读取结果，available 为 False 表示进程无权访问或已退出"""
    value: float
    available: bool = True

    @classmethod
    def unavailable(cls) -> "Reading":
        return cls(0.0, False)

    def or_zero(self) -> float:
        return self.value if self.available else 0.0


@dataclass
class ProcessSample:
    """一个进程在某一时刻的采样"""
    name: str
    cpu_time_ms: float
    memory_mb: float


def read_cpu_time(process: psutil.Process) -> Reading:
    """读取进程累计处理器时间（用户态 + 内核态，毫秒）"""
    try:
        times = process.cpu_times()
    except psutil.Error as e:
        logger.debug(f"无法读取进程CPU时间: {e}")
        return Reading.unavailable()
    return Reading((times.user + times.system) * 1000.0)


def read_memory_usage(process: psutil.Process) -> Reading:
    """
    读取进程私有内存（MB）

    平台提供 private 字段（Windows）时使用它，否则使用常驻内存 rss
    """
    try:
        mem = process.memory_info()
    except psutil.Error as e:
        logger.debug(f"无法读取进程内存: {e}")
        return Reading.unavailable()
    return Reading(getattr(mem, "private", mem.rss) / BYTES_PER_MB)


def safe_cpu_time(process: psutil.Process) -> float:
    """进程累计处理器时间（毫秒），不可读时返回 0.0"""
    return read_cpu_time(process).or_zero()


def safe_memory_usage(process: psutil.Process) -> float:
    """进程私有内存（MB），不可读时返回 0.0"""
    return read_memory_usage(process).or_zero()


def iter_named_processes() -> Iterator[Tuple[str, psutil.Process]]:
    """按枚举顺序遍历名称非空的进程"""
    for proc in psutil.process_iter(["name"]):
        name = proc.info.get("name")
        if not name:
            continue
        yield name, proc


def list_processes() -> List[ProcessSample]:
    """采集所有名称非空进程的处理器时间和内存"""
    samples = [
        ProcessSample(name=name, cpu_time_ms=safe_cpu_time(proc), memory_mb=safe_memory_usage(proc))
        for name, proc in iter_named_processes()
    ]
    logger.debug(f"采集到 {len(samples)} 个进程")
    return samples


def total_cpu_time_ms() -> float:
    """所有名称非空进程的处理器时间之和（毫秒），只读取CPU时间"""
    return sum(safe_cpu_time(proc) for _, proc in iter_named_processes())
