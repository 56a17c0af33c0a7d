"""消息写入事务封装

每次写操作在单个 SQLite 事务内提交，失败时回滚，
确保失败的操作不会留下部分写入。
"""

import aiosqlite

from ..models.message import Message
from .protocols import MessageStore


async def insert_message_atomic(
    conn: aiosqlite.Connection,
    message_store: MessageStore,
    message: Message,
) -> None:
    """在单个事务内插入新消息

    Args:
        conn: 数据库连接（需与 message_store 共享同一连接）
        message_store: MessageStore 实例
        message: 要插入的消息

    Raises:
        Exception: 如果事务提交失败，自动回滚
    """
    try:
        await message_store.insert_message(message)
        await conn.commit()
    except Exception:
        await conn.rollback()
        raise


async def replace_message_atomic(
    conn: aiosqlite.Connection,
    message_store: MessageStore,
    message: Message,
) -> None:
    """在单个事务内覆盖已有消息"""
    try:
        await message_store.replace_message(message)
        await conn.commit()
    except Exception:
        await conn.rollback()
        raise


async def remove_message_atomic(
    conn: aiosqlite.Connection,
    message_store: MessageStore,
    message_id: str,
) -> Message | None:
    """在单个事务内删除消息

    Returns:
        被删除记录的最后状态；不存在时返回 None（不产生写入）
    """
    try:
        removed = await message_store.remove_message(message_id)
        await conn.commit()
    except Exception:
        await conn.rollback()
        raise
    return removed
