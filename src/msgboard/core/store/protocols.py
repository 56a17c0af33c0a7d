"""Store Protocol 接口定义

定义 MessageStore 的抽象接口，
使用 Python Protocol 实现结构化子类型（duck typing）。
"""

from typing import Protocol

from ..models.message import Message


class MessageStore(Protocol):
    """Message 存储接口

    有序 key-value 映射：key 为 message_id，value 为 Message。
    写操作不自动提交事务，由调用方管理。
    """

    async def list_messages(self) -> list[Message]:
        """按 key 顺序返回全部消息"""
        ...

    async def get_message(self, message_id: str) -> Message | None:
        """按 key 精确查询，不存在返回 None"""
        ...

    async def insert_message(self, message: Message) -> None:
        """插入新消息（key 已存在时报错，不覆盖）"""
        ...

    async def replace_message(self, message: Message) -> None:
        """覆盖 key 为 message.id 的已有记录"""
        ...

    async def remove_message(self, message_id: str) -> Message | None:
        """删除并返回被删除记录的最后状态，不存在返回 None"""
        ...
