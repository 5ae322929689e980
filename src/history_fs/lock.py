"""跨平台文件锁实现（基于 filelock 库）

锁由操作系统持有（POSIX 上是 flock，Windows 上是 msvcrt），进程异常退出时
会被自动释放，因此不会残留属于已死进程的锁。
"""

import os
import threading
from pathlib import Path

from filelock import FileLock, Timeout

from .errors import AccessError, AlreadyLockedByThisProcess, NotLocked
from .file_manager import ensure_dir, get_lock_file, get_pid_file
from .logger import logger
from .process import current_pid, process_exists


def _normalize(path: str | os.PathLike) -> str:
    return os.path.abspath(os.fspath(path))


class LockRegistry:
    """进程内锁注册表：路径 -> 操作系统锁

    - 同一路径在本进程内最多持有一把锁
    - _registry_lock 保护 _locks 字典的增删（多线程安全）
    - 由应用生命周期的管理者持有，按引用传给调用方
    """

    def __init__(self):
        self._locks: dict[str, FileLock] = {}
        self._registry_lock = threading.Lock()

    def acquire(self, path: str | os.PathLike) -> bool:
        """尝试获取独占锁（非阻塞），成功返回 True

        其他进程已持有锁时返回 False，这是正常结果而不是错误。

        Raises:
            AlreadyLockedByThisProcess: 本进程已持有该路径的锁
            AccessError: 锁文件无法创建或打开
        """
        key = _normalize(path)
        with self._registry_lock:
            if key in self._locks:
                raise AlreadyLockedByThisProcess(
                    f"file is already locked by this process: {key}"
                )

            # thread_local=False：允许在其他线程中释放
            lock = FileLock(key, timeout=0, thread_local=False)
            try:
                lock.acquire(blocking=False)
            except Timeout:
                logger.info(f"Lock is held by another process: {key}")
                return False
            except OSError as e:
                raise AccessError(f"failed to open lock file: {key}") from e

            self._locks[key] = lock
            logger.debug(f"Acquired lock {key}")
            return True

    def release(self, path: str | os.PathLike) -> None:
        """释放锁并移出注册表

        锁文件不会被删除，避免与正在获取同一把锁的其他进程产生竞争。

        Raises:
            NotLocked: 本进程没有持有该路径的锁
        """
        key = _normalize(path)
        with self._registry_lock:
            lock = self._locks.pop(key, None)
            if lock is None:
                raise NotLocked(f"file was not locked: {key}")
            lock.release()
            logger.debug(f"Released lock {key}")

    def hold(self, path: str | os.PathLike) -> "LockGuard | None":
        """获取锁并返回作用域守卫；锁被其他进程占用时返回 None

        用法：
            guard = registry.hold(path)
            if guard is None:
                ...  # 另一个实例正在运行
            with guard:
                ...
        """
        if not self.acquire(path):
            return None
        return LockGuard(self, _normalize(path))

    def is_locked(self, path: str | os.PathLike) -> bool:
        with self._registry_lock:
            return _normalize(path) in self._locks

    def release_all(self) -> None:
        """释放所有锁（应用退出时调用）

        逐个释放，单个失败不影响其余的锁；释放失败的锁仍留在注册表中，
        全部尝试之后再抛出第一个错误。
        """
        first_error: OSError | None = None
        with self._registry_lock:
            for key, lock in list(self._locks.items()):
                try:
                    lock.release()
                except OSError as e:
                    logger.error(f"Failed to release lock {key}: {e}")
                    if first_error is None:
                        first_error = e
                    continue
                del self._locks[key]

        if first_error is not None:
            raise first_error

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._locks)


class LockGuard:
    """作用域锁守卫：离开 with 块时（包括异常）自动释放"""

    def __init__(self, registry: LockRegistry, path: str):
        self._registry = registry
        self.path = path
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """释放锁（幂等）"""
        if self._released:
            return
        self._released = True
        self._registry.release(self.path)

    def __enter__(self) -> "LockGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


class InstanceLock:
    """工作目录单实例锁"""

    def __init__(self, work_dir: Path, registry: LockRegistry):
        self.work_dir = Path(work_dir)
        self.lock_file = get_lock_file(self.work_dir)
        self.pid_file = get_pid_file(self.work_dir)
        self._registry = registry

    def acquire(self) -> bool:
        """尝试成为该工作目录的唯一实例，成功返回 True"""
        # 确保目录存在
        ensure_dir(self.work_dir)

        if not self._registry.acquire(self.lock_file):
            owner = self.running_owner()
            logger.warning(f"Another instance is already running (pid={owner})")
            return False

        try:
            self.pid_file.write_text(f"{current_pid()}\n")
        except OSError:
            self._registry.release(self.lock_file)
            raise
        logger.info(f"Instance lock acquired for {self.work_dir}")
        return True

    def running_owner(self) -> int | None:
        """读取记录的持有者 PID，进程已退出（PID 文件过期）时返回 None"""
        try:
            pid = int(self.pid_file.read_text().strip())
        except (FileNotFoundError, ValueError):
            return None

        if not process_exists(pid):
            return None
        return pid

    def release(self) -> None:
        """释放锁并删除 PID 文件（锁文件保留）

        Raises:
            NotLocked: 本实例没有持有锁；此时不会触碰其他实例的 PID 文件
        """
        if not self._registry.is_locked(self.lock_file):
            raise NotLocked(f"instance lock is not held: {self.lock_file}")

        # PID 文件必须在释放锁之前删除
        self.pid_file.unlink(missing_ok=True)
        self._registry.release(self.lock_file)
        logger.info(f"Instance lock released for {self.work_dir}")

    def __enter__(self) -> "InstanceLock":
        if not self.acquire():
            raise RuntimeError(f"Another instance holds {self.lock_file}")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
