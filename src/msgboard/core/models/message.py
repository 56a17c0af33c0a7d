"""Message Domain Model -- 消息板唯一实体

Message 一经构建即不可变，更新时通过 revise_message 构建新值替换旧值。
时间戳为 epoch 纳秒（64 位整数）。
"""

from pydantic import BaseModel, ConfigDict, Field


class MessagePayload(BaseModel):
    """创建/更新消息时调用方提交的内容字段"""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(description="标题")
    body: str = Field(description="正文")
    attachment_url: str = Field(
        alias="attachmentURL",
        description="附件 URL，原样保存，不做校验",
    )


class Message(BaseModel):
    """Message 数据模型

    updated_at 在首次更新前为 None，之后每次更新都会刷新，且不早于 created_at。
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(description="唯一标识，UUID4 字符串")
    title: str = Field(description="标题")
    body: str = Field(description="正文")
    attachment_url: str = Field(alias="attachmentURL", description="附件 URL")
    created_at: int = Field(alias="createdAt", ge=0, description="创建时间（ns）")
    updated_at: int | None = Field(
        default=None,
        alias="updatedAt",
        ge=0,
        description="最近一次更新时间（ns），未更新过为 None",
    )


def new_message(message_id: str, payload: MessagePayload, now: int) -> Message:
    """根据 payload 构建一条新消息"""
    return Message(
        id=message_id,
        title=payload.title,
        body=payload.body,
        attachment_url=payload.attachment_url,
        created_at=now,
        updated_at=None,
    )


def revise_message(message: Message, payload: MessagePayload, now: int) -> Message:
    """保留 id/created_at，用 payload 覆盖内容字段并刷新 updated_at

    时钟回拨时 updated_at 取 created_at，保证 updated_at >= created_at。
    """
    return Message(
        id=message.id,
        title=payload.title,
        body=payload.body,
        attachment_url=payload.attachment_url,
        created_at=message.created_at,
        updated_at=max(now, message.created_at),
    )
