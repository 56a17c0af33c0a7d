"""消息板异常体系

NotFound 与 RecordTooLarge 两类错误，均不可通过重试恢复。
"""

from typing import Literal

NotFoundAction = Literal["get", "update", "delete"]


class MessageBoardError(Exception):
    """消息板基础异常"""

    def __init__(self, message: str, code: str) -> None:
        """
        Args:
            message: 面向调用方的错误描述
            code: 稳定的错误码（网关据此映射 HTTP 状态码）
        """
        super().__init__(message)
        self.message = message
        self.code = code


class MessageNotFoundError(MessageBoardError):
    """指定 id 的消息不存在

    错误文本随操作不同而不同，与既有客户端保持一致。
    """

    _TEMPLATES: dict[str, str] = {
        "get": "a message with id={id} not found",
        "update": "couldn't update a message with id={id}. message not found",
        "delete": "couldn't delete a message with id={id}. message not found.",
    }

    def __init__(self, message_id: str, action: NotFoundAction = "get") -> None:
        """
        Args:
            message_id: 未找到的消息 id
            action: 触发错误的操作（get/update/delete）
        """
        super().__init__(
            self._TEMPLATES[action].format(id=message_id),
            code="MESSAGE_NOT_FOUND",
        )
        self.message_id = message_id
        self.action = action


class MessageTooLargeError(MessageBoardError):
    """key 或序列化后的记录超出存储上限"""

    def __init__(self, size: int, limit: int, what: str = "record") -> None:
        super().__init__(
            f"message {what} is {size} bytes, exceeds the limit of {limit} bytes",
            code="MESSAGE_TOO_LARGE",
        )
        self.size = size
        self.limit = limit
        self.what = what
