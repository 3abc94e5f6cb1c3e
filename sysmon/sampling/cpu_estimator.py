import time
from typing import Callable, Optional

import psutil

from sysmon.sampling.process_sampler import total_cpu_time_ms
from sysmon.utils.logger import get_logger

# CPU采样间隔（秒），固定值
SAMPLE_INTERVAL = 0.1


def compute_cpu_percent(start_cpu_ms: float, end_cpu_ms: float,
                        elapsed_ms: float, core_count: int) -> float:
    """
    根据两次处理器时间总和计算CPU使用率

    Args:
        start_cpu_ms: 第一次采样时所有进程处理器时间之和（毫秒）
        end_cpu_ms: 第二次采样时所有进程处理器时间之和（毫秒）
        elapsed_ms: 两次采样之间经过的时间（毫秒）
        core_count: 逻辑核心数

    Returns:
        CPU使用率百分比，结果不做范围裁剪
    """
    capacity_ms = elapsed_ms * core_count
    if capacity_ms <= 0:
        return 0.0  # 避免除零错误
    return (end_cpu_ms - start_cpu_ms) / capacity_ms * 100


class CpuUsageEstimator:
    """通过间隔采样全部进程的处理器时间估算整体CPU使用率"""

    def __init__(
        self,
        cpu_total: Callable[[], float] = total_cpu_time_ms,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
        core_count: Optional[int] = None,
        interval: float = SAMPLE_INTERVAL
    ):
        self.cpu_total = cpu_total
        self.clock = clock
        self.sleep = sleep
        self.core_count = core_count or psutil.cpu_count(logical=True) or 1
        self.interval = interval
        self.logger = get_logger(__name__)

    def estimate_cpu_percent(self) -> float:
        """采样两次处理器时间总和并计算使用率"""
        start_time = self.clock()
        start_cpu = self.cpu_total()

        self.sleep(self.interval)

        end_time = self.clock()
        end_cpu = self.cpu_total()

        elapsed_ms = (end_time - start_time) * 1000.0
        percent = compute_cpu_percent(start_cpu, end_cpu, elapsed_ms, self.core_count)
        self.logger.debug(
            f"CPU采样: 处理器时间差 {end_cpu - start_cpu:.1f}ms, "
            f"经过 {elapsed_ms:.1f}ms, 核心数 {self.core_count}, 使用率 {percent:.2f}%"
        )
        return percent
