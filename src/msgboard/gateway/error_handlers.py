"""全局异常处理 -- 将领域异常转换为显式的 JSON 失败响应

MessageBoardError → {"error": {"code", "message"}} + 对应 HTTP 状态码
"""

import structlog
from fastapi import FastAPI, Request
from msgboard.core.exceptions import MessageBoardError
from starlette.responses import JSONResponse

log = structlog.get_logger()

# 错误码 → HTTP 状态码
ERROR_STATUS_CODES: dict[str, int] = {
    "MESSAGE_NOT_FOUND": 404,
    "MESSAGE_TOO_LARGE": 413,
}


def register_error_handlers(app: FastAPI) -> None:
    """在 app 上注册领域异常处理器"""

    @app.exception_handler(MessageBoardError)
    async def message_board_error_handler(request: Request, exc: MessageBoardError):
        status_code = ERROR_STATUS_CODES.get(exc.code, 400)
        await log.ainfo(
            "message_board_error",
            code=exc.code,
            status_code=status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status_code,
            content={
                "error": {
                    "code": exc.code,
                    "message": exc.message,
                }
            },
        )
