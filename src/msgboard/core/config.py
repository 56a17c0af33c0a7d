"""配置常量模块 -- 可通过环境变量覆盖

包含数据库路径、存储容量上限等可配置常量。
"""

import os
from pathlib import Path


def _get_base_dir() -> Path:
    """获取项目 data 基础目录"""
    return Path(os.environ.get("MSGBOARD_DATA_DIR", "data"))


def get_db_path() -> str:
    """获取 SQLite 数据库路径"""
    return os.environ.get(
        "MSGBOARD_DB_PATH",
        str(_get_base_dir() / "sqlite" / "msgboard.db"),
    )


def get_max_key_bytes() -> int:
    """单条消息 key（message_id）的最大字节数"""
    return int(os.environ.get("MSGBOARD_MAX_KEY_BYTES", "44"))


def get_max_record_bytes() -> int:
    """单条消息序列化后的最大字节数"""
    return int(os.environ.get("MSGBOARD_MAX_RECORD_BYTES", "1024"))


# id 冲突时的最大重试次数（uuid4 空间下实际不会触发）
MESSAGE_ID_MAX_ATTEMPTS: int = 3


def get_server_host() -> str:
    """gateway 监听地址"""
    return os.environ.get("MSGBOARD_HOST", "127.0.0.1")


def get_server_port() -> int:
    """gateway 监听端口"""
    return int(os.environ.get("MSGBOARD_PORT", "8000"))
