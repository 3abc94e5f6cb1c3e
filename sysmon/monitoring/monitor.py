import os
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

import typer

from sysmon.config.config_manager import ConfigManager
from sysmon.reporting.top_processes import DEFAULT_TOP_N, format_process_line, top_by_memory
from sysmon.sampling.cpu_estimator import CpuUsageEstimator
from sysmon.sampling.process_sampler import ProcessSample, list_processes
from sysmon.system.base_component import BaseComponent
from sysmon.monitoring.ticker import Ticker
from sysmon.utils.console import clear_screen
from sysmon.utils.logger import LOG_FILE_PREFIX, MonitorLog, build_log_path, get_logger

TITLE = "Simple System Monitoring Application"
TOP_HEADER = "Top Processes by Memory Usage:"
STARTED_MESSAGE = "=== System Monitoring Started ==="
EXIT_HINT = "Press Ctrl+C to exit..."


@dataclass
class CycleReport:
    """一个监控周期的输出：屏幕显示的行和写入记录文件的行"""
    display_lines: List[str] = field(default_factory=list)
    log_lines: List[str] = field(default_factory=list)


def render_cycle(log_path: str, cpu_percent: float, top: List[Tuple[str, float]]) -> CycleReport:
    """根据一次采样结果生成显示内容和记录内容，不做任何IO"""
    report = CycleReport()

    report.display_lines.append(TITLE)
    report.display_lines.append(f"Log file: {log_path}")

    cpu_text = f"Total CPU Usage: {cpu_percent:.2f}%"
    report.display_lines.append(cpu_text)
    report.log_lines.append(cpu_text)

    report.display_lines.append(f"\n{TOP_HEADER}")
    report.log_lines.append(TOP_HEADER)
    for name, memory_mb in top:
        line = format_process_line(name, memory_mb)
        report.display_lines.append(line)
        report.log_lines.append(line)

    report.display_lines.append(f"\n{EXIT_HINT}")
    return report


class SystemMonitor(BaseComponent):
    """系统监控组件：每个周期清屏、采样、显示并记录CPU使用率和内存占用排行"""

    def __init__(
        self,
        config: Optional[ConfigManager] = None,
        log_path: Optional[str] = None,
        estimator: Optional[CpuUsageEstimator] = None,
        sampler: Callable[[], List[ProcessSample]] = list_processes,
        ticker: Optional[Ticker] = None,
        echo: Callable[[str], None] = typer.echo,
        clear: Callable[[], None] = clear_screen
    ):
        super().__init__()
        self.config = config or ConfigManager()
        self.logger = get_logger(__name__)

        self.top_n = self._read_top_n()

        # 记录文件路径在启动时确定，之后只读
        if log_path is None:
            log_dir = self.config.get("monitor.log_dir")
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            log_path = build_log_path(
                log_dir,
                prefix=self.config.get("monitor.log_file_prefix", LOG_FILE_PREFIX)
            )
        self.log_path = log_path
        self.record = MonitorLog(log_path)

        self.sampler = sampler
        self.estimator = estimator or CpuUsageEstimator()
        self.ticker = ticker or Ticker()
        self.echo = echo
        self.clear = clear

        self.logger.info(f"系统监控组件初始化完成，记录文件: {self.log_path}")

    def _read_top_n(self) -> int:
        """读取排行数量，缺失或不是整数时使用默认值"""
        value = self.config.get("monitor.top_n")
        if value is None:
            return DEFAULT_TOP_N
        if isinstance(value, bool) or not isinstance(value, int):
            self.logger.warning(f"配置 monitor.top_n 不是整数: {value!r}，使用默认值 {DEFAULT_TOP_N}")
            return DEFAULT_TOP_N
        return value

    def announce(self) -> None:
        """提示记录文件位置并记录监控开始"""
        self.echo(f"Log file will be saved at: {self.log_path}")
        self.record.log(STARTED_MESSAGE)

    def collect(self) -> Tuple[float, List[Tuple[str, float]]]:
        """采集CPU使用率和内存占用排行"""
        cpu_percent = self.estimator.estimate_cpu_percent()
        top = top_by_memory(self.sampler(), self.top_n)
        return cpu_percent, top

    def run_cycle(self) -> CycleReport:
        """执行一个监控周期"""
        cpu_percent, top = self.collect()
        report = render_cycle(self.log_path, cpu_percent, top)

        self.clear()
        for line in report.display_lines:
            self.echo(line)
        for line in report.log_lines:
            self.record.log(line)

        self.mark_cycle()
        self.logger.debug(f"监控周期 {self.cycle_count} 完成")
        return report

    def run(self, max_cycles: Optional[int] = None) -> None:
        """
        运行监控循环

        Args:
            max_cycles: 最大周期数，None 表示一直运行直到进程被外部中断
        """
        self.start()
        self.announce()
        try:
            for _ in self.ticker.ticks(max_cycles):
                try:
                    self.run_cycle()
                except Exception as e:
                    self.record_error(e)
                    self.logger.error(f"监控周期出错: {str(e)}", exc_info=True)
                    raise
        finally:
            self.stop()

    def get_status(self):
        """获取监控组件状态"""
        status = super().get_status()
        status.update({
            "log_path": self.log_path,
            "top_n": self.top_n,
            "cycle_period": self.ticker.period,
            "sample_interval": self.estimator.interval
        })
        return status
