"""归档命名方案 - checkpoint 编码与分片路径推导

所有函数都是纯函数：相同输入总是得到相同输出，不依赖 locale、时间或文件系统。
不同节点和归档工具依赖这一点在没有协调的情况下找到同一个文件。

    >>> remote_name("bucket", "1f400a", "xdr.gz")
    'bucket/1f/40/0a/bucket-1f400a.xdr.gz'
"""

from rusty_results.prelude import Err, Ok

from ..config import CHECKPOINT_HEX_WIDTH, SHARD_LEVELS, SHARD_WIDTH
from ..errors import InvalidFormat
from .validators import validate_checkpoint, validate_hex_id


def hex_str(checkpoint: int) -> str:
    """将 checkpoint 编号格式化为 8 位小写十六进制（字典序与数值序一致）"""
    match validate_checkpoint(checkpoint):
        case Err(e):
            raise InvalidFormat(e)
        case Ok(n):
            return format(n, f"0{CHECKPOINT_HEX_WIDTH}x")


def shard_of(hex_id: str) -> tuple[str, ...]:
    """取标识符前 6 位，拆分为三组两位小写十六进制

    Raises:
        InvalidFormat: 前 6 位不全是十六进制数字
    """
    match validate_hex_id(hex_id):
        case Err(e):
            raise InvalidFormat(e)
        case Ok(valid):
            prefix = valid[: SHARD_LEVELS * SHARD_WIDTH].lower()

    return tuple(
        prefix[i : i + SHARD_WIDTH] for i in range(0, len(prefix), SHARD_WIDTH)
    )


def base_name(type: str, hex_id: str, suffix: str) -> str:
    return f"{type}-{hex_id}.{suffix}"


def hex_dir(hex_id: str) -> str:
    """三级分片目录，例如 "1f400a..." -> "1f/40/0a"

    每级最多 256 个子目录，避免单个目录下的条目数随归档规模膨胀。
    """
    return "/".join(shard_of(hex_id))


def remote_dir(type: str, hex_id: str) -> str:
    return f"{type}/{hex_dir(hex_id)}"


def remote_name(type: str, hex_id: str, suffix: str) -> str:
    return f"{remote_dir(type, hex_id)}/{base_name(type, hex_id, suffix)}"


def checkpoint_name(type: str, checkpoint: int, suffix: str) -> str:
    """按 checkpoint 编号定位的归档文件路径（ledger、transactions 等）"""
    return remote_name(type, hex_str(checkpoint), suffix)
