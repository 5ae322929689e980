"""进程探测 - 当前进程 PID 与任意 PID 的存活检查"""

import os
import sys


def current_pid() -> int:
    return os.getpid()


def process_exists(pid: int) -> bool:
    """检查进程是否存活

    受操作系统可见性限制：返回 False 既可能是进程不存在，
    也可能是进程存在但当前用户无权访问，两者不作区分。
    """
    if pid <= 0:
        return False

    # Windows 上 os.kill(pid, 0) 会直接终止目标进程
    if sys.platform == "win32":
        import psutil

        return psutil.pid_exists(pid)

    try:
        os.kill(pid, 0)
        return True
    except (OSError, OverflowError):
        # OverflowError：PID 超出 C int 范围（例如损坏的 PID 文件）
        return False
