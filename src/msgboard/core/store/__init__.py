"""msgboard Core Store -- SQLite 持久化实现

提供工厂函数创建共享数据库连接的 Store 实例组。
"""

import asyncio
from pathlib import Path

import aiosqlite

from .message_store import SqliteMessageStore
from .protocols import MessageStore
from .sqlite_init import init_db
from .transaction import (
    insert_message_atomic,
    remove_message_atomic,
    replace_message_atomic,
)


class StoreGroup:
    """Store 实例组 -- 共享同一个数据库连接

    write_lock 串行化全部写操作：update/delete 的"先读后写"不会与其他写入交错，
    共享连接上的事务也不会互相穿插。
    """

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self.conn = conn
        self.message_store = SqliteMessageStore(conn)
        self.write_lock = asyncio.Lock()


async def create_store_group(db_path: str) -> StoreGroup:
    """创建 Store 实例组

    Args:
        db_path: SQLite 数据库文件路径

    Returns:
        StoreGroup 实例
    """
    # 确保数据库目录存在
    db_dir = Path(db_path).parent
    db_dir.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(db_path)
    conn.row_factory = aiosqlite.Row
    await init_db(conn)

    return StoreGroup(conn=conn)


__all__ = [
    "StoreGroup",
    "create_store_group",
    "MessageStore",
    "SqliteMessageStore",
    "init_db",
    "insert_message_atomic",
    "replace_message_atomic",
    "remove_message_atomic",
]
