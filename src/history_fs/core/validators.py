"""标识符验证函数 - 数据验证层"""

import re
from dataclasses import dataclass

from rusty_results.prelude import Err, Ok, Result

from ..config import SHARD_LEVELS, SHARD_WIDTH

UINT32_MAX = 2**32 - 1

_HEX_PREFIX = re.compile(r"[0-9a-fA-F]{%d}" % (SHARD_LEVELS * SHARD_WIDTH))


@dataclass(frozen=True)
class FailureHint:
    """带建议的错误类型"""

    message: str
    suggestion: str | None = None


def validate_hex_id(hex_id: str) -> Result[str, FailureHint]:
    """验证标识符至少以 6 位十六进制数字开头（大小写不敏感，后缀任意）"""
    if not isinstance(hex_id, str):
        return Err(FailureHint(f"标识符必须是字符串，实际为 {type(hex_id).__name__}"))

    if _HEX_PREFIX.match(hex_id) is None:
        return Err(
            FailureHint(
                f"标识符 {hex_id!r} 的前 {SHARD_LEVELS * SHARD_WIDTH} 位不全是十六进制数字",
                suggestion="传入 hex 编码的哈希或 checkpoint 编号",
            )
        )

    return Ok(hex_id)


def validate_checkpoint(checkpoint: int) -> Result[int, FailureHint]:
    """验证 checkpoint 编号是 uint32"""
    # bool 是 int 的子类，但不是合法的编号
    if isinstance(checkpoint, bool) or not isinstance(checkpoint, int):
        return Err(
            FailureHint(f"checkpoint 必须是整数，实际为 {type(checkpoint).__name__}")
        )

    if not 0 <= checkpoint <= UINT32_MAX:
        return Err(
            FailureHint(
                f"checkpoint {checkpoint} 超出 uint32 范围",
                suggestion=f"取值范围为 0 到 {UINT32_MAX}",
            )
        )

    return Ok(checkpoint)
