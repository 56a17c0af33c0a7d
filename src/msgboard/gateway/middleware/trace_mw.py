"""TraceMiddleware -- 消息操作追踪

从 /api/messages/{message_id} 路径中提取 message_id，
绑定到 structlog contextvars，贯穿该请求的全部日志。
"""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

_MESSAGES_PREFIX = "/api/messages/"


class TraceMiddleware(BaseHTTPMiddleware):
    """消息级追踪中间件 -- 为单条消息操作绑定 message_id"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path

        if path.startswith(_MESSAGES_PREFIX):
            message_id = path[len(_MESSAGES_PREFIX):].split("/", 1)[0]
            if message_id:
                structlog.contextvars.bind_contextvars(message_id=message_id)

        return await call_next(request)
