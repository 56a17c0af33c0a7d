"""CLI 入口模块 -- python -m msgboard.core <command>

支持的命令：
  list        以 JSON Lines 输出全部消息
  get <id>    输出单条消息
  count       输出消息条数
"""

import asyncio
import sys

from .config import get_db_path
from .exceptions import MessageNotFoundError

_USAGE = """用法: python -m msgboard.core <command>
命令:
  list        以 JSON Lines 输出全部消息
  get <id>    输出单条消息
  count       输出消息条数"""


def main() -> None:
    """CLI 主入口"""
    if len(sys.argv) < 2:
        print(_USAGE)
        sys.exit(1)

    command = sys.argv[1]

    if command == "list":
        asyncio.run(list_messages())
    elif command == "get" and len(sys.argv) == 3:
        try:
            asyncio.run(get_message(sys.argv[2]))
        except MessageNotFoundError as e:
            print(e.message, file=sys.stderr)
            sys.exit(1)
    elif command == "count":
        asyncio.run(count_messages())
    else:
        print(f"未知命令: {' '.join(sys.argv[1:])}")
        print(_USAGE)
        sys.exit(1)


async def list_messages() -> None:
    """按 key 顺序输出全部消息"""
    from .store import create_store_group

    store_group = await create_store_group(get_db_path())
    try:
        for message in await store_group.message_store.list_messages():
            print(message.model_dump_json(by_alias=True))
    finally:
        await store_group.conn.close()


async def get_message(message_id: str) -> None:
    """输出单条消息，不存在时抛出 MessageNotFoundError"""
    from .store import create_store_group

    store_group = await create_store_group(get_db_path())
    try:
        message = await store_group.message_store.get_message(message_id)
    finally:
        await store_group.conn.close()

    if message is None:
        raise MessageNotFoundError(message_id, "get")
    print(message.model_dump_json(by_alias=True))


async def count_messages() -> None:
    """输出消息条数"""
    from .store import create_store_group

    store_group = await create_store_group(get_db_path())
    try:
        print(await store_group.message_store.count_messages())
    finally:
        await store_group.conn.close()


if __name__ == "__main__":
    main()
