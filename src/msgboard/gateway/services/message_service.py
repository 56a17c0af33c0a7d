"""MessageService -- 消息增删改查业务逻辑

四个入口（list/get/create/update/delete）直接映射到 MessageStore：
1. 写操作在 StoreGroup.write_lock 下串行执行
2. 每次写入单事务提交，失败回滚
3. 不存在的 id 抛出 MessageNotFoundError，存储保持不变
"""

import time
import uuid
from collections.abc import Callable

import aiosqlite
import structlog
from msgboard.core.config import MESSAGE_ID_MAX_ATTEMPTS
from msgboard.core.exceptions import MessageNotFoundError
from msgboard.core.models import Message, MessagePayload, new_message, revise_message
from msgboard.core.store import (
    StoreGroup,
    insert_message_atomic,
    remove_message_atomic,
    replace_message_atomic,
)

log = structlog.get_logger()


class MessageService:
    """消息业务服务"""

    def __init__(
        self,
        store_group: StoreGroup,
        clock: Callable[[], int] = time.time_ns,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._stores = store_group
        self._clock = clock
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))

    async def list_messages(self) -> list[Message]:
        """按 key 顺序返回全部消息，存储为空时返回空列表"""
        return await self._stores.message_store.list_messages()

    async def get_message(self, message_id: str) -> Message:
        """查询单条消息

        Raises:
            MessageNotFoundError: 消息不存在
        """
        message = await self._stores.message_store.get_message(message_id)
        if message is None:
            log.info("message_not_found", message_id=message_id, action="get")
            raise MessageNotFoundError(message_id, "get")
        return message

    async def create_message(self, payload: MessagePayload) -> Message:
        """创建消息：生成新 id，created_at 取当前时间，updated_at 为空

        uuid4 冲突在实际中不会发生；一旦 INSERT 命中主键冲突，
        重新生成 id 重试，最多 MESSAGE_ID_MAX_ATTEMPTS 次。

        Raises:
            MessageTooLargeError: 记录超出存储上限
        """
        async with self._stores.write_lock:
            for attempt in range(1, MESSAGE_ID_MAX_ATTEMPTS + 1):
                message = new_message(self._id_factory(), payload, self._clock())
                try:
                    await insert_message_atomic(
                        self._stores.conn,
                        self._stores.message_store,
                        message,
                    )
                except aiosqlite.IntegrityError:
                    if attempt == MESSAGE_ID_MAX_ATTEMPTS:
                        raise
                    log.warning(
                        "message_id_collision",
                        message_id=message.id,
                        attempt=attempt,
                    )
                    continue
                break

        log.info("message_created", message_id=message.id)
        return message

    async def update_message(self, message_id: str, payload: MessagePayload) -> Message:
        """更新消息：保留 id/created_at，覆盖内容字段并刷新 updated_at

        Raises:
            MessageNotFoundError: 消息不存在（存储不变）
            MessageTooLargeError: 更新后记录超出存储上限（存储不变）
        """
        async with self._stores.write_lock:
            existing = await self._stores.message_store.get_message(message_id)
            if existing is None:
                log.info("message_not_found", message_id=message_id, action="update")
                raise MessageNotFoundError(message_id, "update")

            updated = revise_message(existing, payload, self._clock())
            await replace_message_atomic(
                self._stores.conn,
                self._stores.message_store,
                updated,
            )

        log.info("message_updated", message_id=message_id)
        return updated

    async def delete_message(self, message_id: str) -> Message:
        """删除消息并返回其最后状态

        Raises:
            MessageNotFoundError: 消息不存在
        """
        async with self._stores.write_lock:
            removed = await remove_message_atomic(
                self._stores.conn,
                self._stores.message_store,
                message_id,
            )

        if removed is None:
            log.info("message_not_found", message_id=message_id, action="delete")
            raise MessageNotFoundError(message_id, "delete")

        log.info("message_deleted", message_id=message_id)
        return removed
