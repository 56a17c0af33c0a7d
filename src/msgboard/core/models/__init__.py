"""msgboard Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .message import Message, MessagePayload, new_message, revise_message

__all__ = [
    "Message",
    "MessagePayload",
    # 记录构建
    "new_message",
    "revise_message",
]
