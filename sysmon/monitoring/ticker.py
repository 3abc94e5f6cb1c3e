import time
from typing import Callable, Iterator, Optional

# 监控周期（秒），固定值
CYCLE_PERIOD = 5.0


class Ticker:
    """
    固定周期的节拍器

    第一个节拍立即产生，之后每个节拍前阻塞等待一个周期。
    周期从上一次迭代结束时开始计算，迭代超时不会跳过节拍。
    """

    def __init__(self, period: float = CYCLE_PERIOD, sleep: Callable[[float], None] = time.sleep):
        self.period = period
        self.sleep = sleep

    def ticks(self, limit: Optional[int] = None) -> Iterator[int]:
        """产生节拍序号，limit 为 None 时无限产生"""
        tick = 0
        while limit is None or tick < limit:
            if tick:
                self.sleep(self.period)
            yield tick
            tick += 1
