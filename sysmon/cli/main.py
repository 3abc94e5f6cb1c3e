#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
简易系统监控CLI主程序
"""
from typing import Optional

import typer

from sysmon import __version__
from sysmon.config.config_manager import ConfigManager
from sysmon.monitoring.monitor import SystemMonitor
from sysmon.utils.console import print_error, print_success
from sysmon.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

# 创建Typer应用
app = typer.Typer(add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"sysmon {__version__}")
        raise typer.Exit()


@app.command("init-config")
def init_config(ctx: typer.Context):
    """在配置目录中写入默认配置文件"""
    config: ConfigManager = ctx.obj["config"]
    try:
        config.save()
    except OSError as e:
        print_error(f"写入配置失败: {e}")
        raise typer.Exit(1)
    print_success(f"已写入默认配置: {config.main_config_path}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_dir: str = typer.Option("config", "--config-dir", "-c", help="配置文件目录"),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="诊断日志级别 (DEBUG, INFO, WARNING, ERROR)"
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="显示版本号"
    )
):
    """简易系统监控：周期显示CPU使用率和内存占用最高的进程，并写入记录文件"""
    config = ConfigManager(config_dir=config_dir)
    setup_logging(log_level or config.get("general.log_level") or "WARNING")

    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is not None:
        return

    monitor = SystemMonitor(config)
    try:
        monitor.run()
    except KeyboardInterrupt:
        # Ctrl+C 是唯一的退出方式，只是不打印堆栈
        logger.info("收到中断信号，监控结束")


if __name__ == "__main__":
    app()
