"""异常类型"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core.validators import FailureHint


class HistoryFsError(Exception):
    """history_fs 所有异常的基类"""


class AccessError(HistoryFsError):
    """文件系统查询失败（不是 not found，而是权限、I/O 等）"""


class InvalidFormat(HistoryFsError):
    """标识符格式不合法（十六进制位数不足或超出 uint32 范围）"""

    def __init__(self, hint: "FailureHint"):
        super().__init__(hint.message)
        self.hint = hint


class AlreadyLockedByThisProcess(HistoryFsError):
    """本进程已经持有该路径的锁（调用方逻辑错误）"""


class NotLocked(HistoryFsError):
    """释放一个本进程未持有的锁（调用方逻辑错误）"""


class CreateError(HistoryFsError):
    """目录树创建失败"""


class DeleteError(HistoryFsError):
    """目录树删除失败，可能已部分删除"""
