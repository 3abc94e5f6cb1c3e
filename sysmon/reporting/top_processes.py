from typing import Iterable, List, Tuple

from sysmon.sampling.process_sampler import ProcessSample

DEFAULT_TOP_N = 10


def top_by_memory(samples: Iterable[ProcessSample], n: int = DEFAULT_TOP_N) -> List[Tuple[str, float]]:
    """
    按内存占用降序选出前 n 个进程

    sorted 是稳定排序，内存相同的进程保持原枚举顺序

    Returns:
        (进程名, 内存MB) 列表，最多 n 项
    """
    if n <= 0:
        return []
    ranked = sorted(samples, key=lambda s: s.memory_mb, reverse=True)
    return [(s.name, s.memory_mb) for s in ranked[:n]]


def format_process_line(name: str, memory_mb: float) -> str:
    return f"{name} - {memory_mb:.2f} MB"
