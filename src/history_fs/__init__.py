"""历史归档文件系统工具：单实例文件锁、目录树操作和确定性的归档路径命名"""

from .core.naming import (
    base_name,
    checkpoint_name,
    hex_dir,
    hex_str,
    remote_dir,
    remote_name,
    shard_of,
)
from .errors import (
    AccessError,
    AlreadyLockedByThisProcess,
    CreateError,
    DeleteError,
    HistoryFsError,
    InvalidFormat,
    NotLocked,
)
from .file_manager import deltree, ensure_archive_dir, ensure_dir, exists, mkdir, mkpath
from .lock import InstanceLock, LockGuard, LockRegistry
from .process import current_pid, process_exists

__all__ = [
    "AccessError",
    "AlreadyLockedByThisProcess",
    "CreateError",
    "DeleteError",
    "HistoryFsError",
    "InstanceLock",
    "InvalidFormat",
    "LockGuard",
    "LockRegistry",
    "NotLocked",
    "base_name",
    "checkpoint_name",
    "current_pid",
    "deltree",
    "ensure_archive_dir",
    "ensure_dir",
    "exists",
    "hex_dir",
    "hex_str",
    "mkdir",
    "mkpath",
    "process_exists",
    "remote_dir",
    "remote_name",
    "shard_of",
]
