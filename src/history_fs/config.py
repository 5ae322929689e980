"""配置常量和环境变量加载"""

import os

# 日志配置
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# 目录配置
DIR_MODE = int(os.getenv("HISTORY_FS_DIR_MODE", "700"), 8)  # 新建目录权限

# 单实例锁配置
LOCK_FILE_NAME = "instance.lock"
PID_FILE_NAME = "instance.pid"  # 锁文件会被 filelock 截断，PID 单独存放

# 命名方案（跨节点必须一致，不可配置）
CHECKPOINT_HEX_WIDTH = 8
SHARD_LEVELS = 3
SHARD_WIDTH = 2
