"""Gateway 启动入口 -- python -m msgboard.gateway / msgboard-gateway

监听地址由 MSGBOARD_HOST / MSGBOARD_PORT 环境变量控制。
"""

import uvicorn

from msgboard.core.config import get_server_host, get_server_port


def main() -> None:
    """以 uvicorn 启动 gateway app"""
    uvicorn.run(
        "msgboard.gateway.main:app",
        host=get_server_host(),
        port=get_server_port(),
        # 日志由 setup_logging 统一配置
        log_config=None,
    )


if __name__ == "__main__":
    main()
