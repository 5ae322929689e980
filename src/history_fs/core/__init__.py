"""核心模块 - 命名方案和标识符验证"""

from . import naming, validators
from .naming import (
    base_name,
    checkpoint_name,
    hex_dir,
    hex_str,
    remote_dir,
    remote_name,
    shard_of,
)
from .validators import FailureHint

__all__ = [
    "naming",
    "validators",
    "FailureHint",
    "base_name",
    "checkpoint_name",
    "hex_dir",
    "hex_str",
    "remote_dir",
    "remote_name",
    "shard_of",
]
