"""文件管理器 - 负责目录的创建、删除和存在性检查

路径统一使用 "/" 作为逻辑分隔符。
"""

import os
from pathlib import Path

from .config import DIR_MODE, LOCK_FILE_NAME, PID_FILE_NAME
from .core.naming import remote_dir
from .errors import AccessError, CreateError, DeleteError
from .logger import logger


def exists(path: str | os.PathLike) -> bool:
    """检查路径是否存在

    Raises:
        AccessError: 除 not found 以外的任何 stat 失败（权限、I/O 等）
    """
    name = os.fspath(path)
    if not name:
        return False

    try:
        os.stat(name)
    except FileNotFoundError:
        return False
    except OSError as e:
        raise AccessError(f"error accessing path: {name}") from e
    return True


def mkdir(path: str | os.PathLike) -> bool:
    """创建单级目录，失败（包括已存在）返回 False"""
    name = os.fspath(path)
    try:
        os.mkdir(name, DIR_MODE)
    except OSError as e:
        logger.debug(f"failed to create dir {name}: {e}")
        return False
    logger.debug(f"created dir {name}")
    return True


def mkpath(path: str | os.PathLike) -> bool:
    """逐级创建目录（类似 mkdir -p），幂等

    从左到右遍历每个 "/" 前缀，不存在则创建。mkdir 失败后会重新检查一次，
    如果目录已被并发的调用方创建，视为成功。
    """
    name = os.fspath(path)
    pos = 0
    while pos < len(name):
        slash = name.find("/", pos)
        pos = len(name) if slash == -1 else slash
        prefix = name[:pos]
        pos += 1

        # 绝对路径开头、"//" 或结尾 "/" 会产生空段
        if not prefix or prefix.endswith("/"):
            continue

        if exists(prefix):
            continue
        if not mkdir(prefix) and not exists(prefix):
            return False

    return True


def ensure_dir(path: str | os.PathLike) -> Path:
    """确保目录存在，失败时抛出 CreateError"""
    if not mkpath(path):
        raise CreateError(f"failed to create path: {os.fspath(path)}")
    return Path(path)


def ensure_archive_dir(root: Path, type: str, hex_id: str) -> Path:
    """在本地根目录下创建归档文件所在的分片目录"""
    return ensure_dir(f"{Path(root).as_posix()}/{remote_dir(type, hex_id)}")


def _raise(err: OSError) -> None:
    raise err


def _remove(name: str, is_dir: bool) -> None:
    logger.debug(f"deleting: {name}")
    if is_dir:
        os.rmdir(name)
    else:
        os.remove(name)


def deltree(path: str | os.PathLike) -> None:
    """深度优先递归删除目录（先删子项，再删父目录）

    符号链接只删除链接本身，不跟随。

    Raises:
        DeleteError: 任何一步删除失败；此时目录树可能已被部分删除
    """
    name = os.fspath(path)
    try:
        if os.path.islink(name) or not os.path.isdir(name):
            _remove(name, is_dir=False)
            return

        for dirpath, dirnames, filenames in os.walk(
            name, topdown=False, onerror=_raise
        ):
            for filename in filenames:
                _remove(os.path.join(dirpath, filename), is_dir=False)
            for dirname in dirnames:
                child = os.path.join(dirpath, dirname)
                _remove(child, is_dir=not os.path.islink(child))
        _remove(name, is_dir=True)
    except OSError as e:
        raise DeleteError(f"deltree failed on {name}: {e}") from e


def get_lock_file(work_dir: Path) -> Path:
    return Path(work_dir) / LOCK_FILE_NAME


def get_pid_file(work_dir: Path) -> Path:
    return Path(work_dir) / PID_FILE_NAME
