"""消息路由

GET    /api/messages: 消息列表（按 id 顺序）
GET    /api/messages/{message_id}: 单条消息
POST   /api/messages: 创建消息，返回 201
PUT    /api/messages/{message_id}: 更新消息
DELETE /api/messages/{message_id}: 删除消息，返回被删除的记录

不存在的 id 由 MessageNotFoundError 经全局异常处理器转换为 404。
"""

from fastapi import APIRouter, Depends
from msgboard.core.models import Message, MessagePayload
from pydantic import BaseModel

from ..deps import get_store_group
from ..services.message_service import MessageService

router = APIRouter()


class MessageListResponse(BaseModel):
    """消息列表响应"""

    messages: list[Message]


@router.get("/api/messages", response_model=MessageListResponse)
async def list_messages(store_group=Depends(get_store_group)):
    """返回全部消息，存储为空时返回空列表"""
    service = MessageService(store_group)
    return MessageListResponse(messages=await service.list_messages())


@router.get("/api/messages/{message_id}", response_model=Message)
async def get_message(message_id: str, store_group=Depends(get_store_group)):
    """按 id 查询单条消息"""
    service = MessageService(store_group)
    return await service.get_message(message_id)


@router.post("/api/messages", response_model=Message, status_code=201)
async def create_message(
    payload: MessagePayload,
    store_group=Depends(get_store_group),
):
    """创建消息：生成 id 与 createdAt，updatedAt 为 null"""
    service = MessageService(store_group)
    return await service.create_message(payload)


@router.put("/api/messages/{message_id}", response_model=Message)
async def update_message(
    message_id: str,
    payload: MessagePayload,
    store_group=Depends(get_store_group),
):
    """更新消息内容，保留 id 与 createdAt"""
    service = MessageService(store_group)
    return await service.update_message(message_id, payload)


@router.delete("/api/messages/{message_id}", response_model=Message)
async def delete_message(message_id: str, store_group=Depends(get_store_group)):
    """删除消息并返回其最后状态"""
    service = MessageService(store_group)
    return await service.delete_message(message_id)
