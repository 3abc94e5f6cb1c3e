import sys

import typer

# 终端颜色代码
COLOR_RESET = "\033[0m"
COLOR_GREEN = "\033[32m"
COLOR_RED = "\033[31m"


def print_success(message: str) -> None:
    """打印成功消息（绿色）"""
    print(f"{COLOR_GREEN}[+] {message}{COLOR_RESET}")


def print_error(message: str) -> None:
    """打印错误消息（红色）"""
    print(f"{COLOR_RED}[-] {message}{COLOR_RESET}", file=sys.stderr)


def clear_screen() -> None:
    """清空终端屏幕"""
    typer.clear()
