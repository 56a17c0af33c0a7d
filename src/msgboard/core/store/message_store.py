"""MessageStore SQLite 实现

messages 表即有序 key-value 映射：key 为 message_id，按主键升序遍历。
写入前校验 key 与记录大小上限，超限时不落盘。
"""

import aiosqlite

from ..config import get_max_key_bytes, get_max_record_bytes
from ..exceptions import MessageTooLargeError
from ..models.message import Message

_COLUMNS = "message_id, title, body, attachment_url, created_at, updated_at"


class SqliteMessageStore:
    """MessageStore 的 SQLite 实现"""

    def __init__(
        self,
        conn: aiosqlite.Connection,
        max_key_bytes: int | None = None,
        max_record_bytes: int | None = None,
    ) -> None:
        self._conn = conn
        self._max_key_bytes = (
            max_key_bytes if max_key_bytes is not None else get_max_key_bytes()
        )
        self._max_record_bytes = (
            max_record_bytes if max_record_bytes is not None else get_max_record_bytes()
        )

    async def list_messages(self) -> list[Message]:
        """按 message_id 升序返回全部消息"""
        cursor = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM messages ORDER BY message_id ASC"
        )
        rows = await cursor.fetchall()
        return [self._row_to_message(row) for row in rows]

    async def get_message(self, message_id: str) -> Message | None:
        """根据 message_id 查询消息"""
        cursor = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM messages WHERE message_id = ?",
            (message_id,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_message(row)

    async def insert_message(self, message: Message) -> None:
        """插入新消息

        注意：此方法不自动提交事务，需由调用方管理事务。
        key 冲突时抛出 aiosqlite.IntegrityError，不会覆盖已有记录。
        """
        self.check_capacity(message)
        await self._conn.execute(
            f"INSERT INTO messages ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
            self._message_to_params(message),
        )

    async def replace_message(self, message: Message) -> None:
        """覆盖已有消息（不自动提交）"""
        self.check_capacity(message)
        params = self._message_to_params(message)
        await self._conn.execute(
            """
            UPDATE messages
            SET title = ?, body = ?, attachment_url = ?,
                created_at = ?, updated_at = ?
            WHERE message_id = ?
            """,
            (*params[1:], params[0]),
        )

    async def remove_message(self, message_id: str) -> Message | None:
        """删除消息并返回其最后状态（不自动提交）"""
        existing = await self.get_message(message_id)
        if existing is None:
            return None
        await self._conn.execute(
            "DELETE FROM messages WHERE message_id = ?",
            (message_id,),
        )
        return existing

    async def count_messages(self) -> int:
        """统计消息条数"""
        cursor = await self._conn.execute("SELECT COUNT(*) FROM messages")
        row = await cursor.fetchone()
        return row[0] if row else 0

    def check_capacity(self, message: Message) -> None:
        """校验 key 与序列化记录大小

        Raises:
            MessageTooLargeError: 任一超出上限
        """
        key_size = len(message.id.encode("utf-8"))
        if key_size > self._max_key_bytes:
            raise MessageTooLargeError(key_size, self._max_key_bytes, what="key")

        record_size = len(message.model_dump_json(by_alias=True).encode("utf-8"))
        if record_size > self._max_record_bytes:
            raise MessageTooLargeError(record_size, self._max_record_bytes)

    @staticmethod
    def _message_to_params(message: Message) -> tuple:
        return (
            message.id,
            message.title,
            message.body,
            message.attachment_url,
            message.created_at,
            message.updated_at,
        )

    @staticmethod
    def _row_to_message(row: aiosqlite.Row) -> Message:
        """将数据库行转换为 Message 模型"""
        return Message(
            id=row[0],
            title=row[1],
            body=row[2],
            attachment_url=row[3],
            created_at=row[4],
            updated_at=row[5],
        )
