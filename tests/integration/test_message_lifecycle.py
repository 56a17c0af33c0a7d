"""消息生命周期集成测试

create → update → delete → get 全流程，经由完整的 gateway app。
"""

import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from msgboard.core.store import create_store_group


@pytest_asyncio.fixture
async def integration_app(tmp_path: Path):
    """集成测试用 FastAPI app"""
    os.environ["MSGBOARD_DB_PATH"] = str(tmp_path / "lifecycle.db")

    from msgboard.gateway.main import create_app

    app = create_app()
    store_group = await create_store_group(str(tmp_path / "lifecycle.db"))
    app.state.store_group = store_group

    yield app

    await store_group.conn.close()
    os.environ.pop("MSGBOARD_DB_PATH", None)


@pytest_asyncio.fixture
async def client(integration_app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=integration_app),
        base_url="http://test",
    ) as ac:
        yield ac


class TestMessageLifecycle:
    """完整生命周期"""

    async def test_create_update_delete(self, client: AsyncClient):
        # create
        resp = await client.post(
            "/api/messages",
            json={"title": "Hi", "body": "B", "attachmentURL": ""},
        )
        assert resp.status_code == 201
        r1 = resp.json()
        assert r1["updatedAt"] is None

        # update
        resp = await client.put(
            f"/api/messages/{r1['id']}",
            json={"title": "Hi2", "body": "B", "attachmentURL": ""},
        )
        assert resp.status_code == 200
        r2 = resp.json()
        assert r2["id"] == r1["id"]
        assert r2["createdAt"] == r1["createdAt"]
        assert r2["title"] == "Hi2"
        assert r2["updatedAt"] is not None
        assert r2["updatedAt"] >= r2["createdAt"]

        # delete 返回最新状态
        resp = await client.delete(f"/api/messages/{r1['id']}")
        assert resp.status_code == 200
        assert resp.json() == r2

        # get → NotFound
        resp = await client.get(f"/api/messages/{r1['id']}")
        assert resp.status_code == 404
        assert resp.json()["error"]["message"] == (
            f"a message with id={r1['id']} not found"
        )

        resp = await client.get("/api/messages")
        assert resp.json() == {"messages": []}

    async def test_failed_operations_leave_store_unchanged(self, client: AsyncClient):
        await client.post(
            "/api/messages",
            json={"title": "keep", "body": "B", "attachmentURL": ""},
        )
        before = (await client.get("/api/messages")).json()

        assert (await client.get("/api/messages/ghost")).status_code == 404
        assert (
            await client.put(
                "/api/messages/ghost",
                json={"title": "x", "body": "y", "attachmentURL": ""},
            )
        ).status_code == 404
        assert (await client.delete("/api/messages/ghost")).status_code == 404

        assert (await client.get("/api/messages")).json() == before


class TestDurability:
    """进程重启后消息完整"""

    async def test_messages_survive_restart(self, tmp_path: Path):
        db_path = str(tmp_path / "durable.db")
        os.environ["MSGBOARD_DB_PATH"] = db_path

        try:
            from msgboard.gateway.main import create_app

            # 第一次启动：创建并更新消息
            app1 = create_app()
            sg1 = await create_store_group(db_path)
            app1.state.store_group = sg1

            async with AsyncClient(
                transport=ASGITransport(app=app1),
                base_url="http://test",
            ) as c1:
                resp = await c1.post(
                    "/api/messages",
                    json={"title": "Durable", "body": "B", "attachmentURL": "a"},
                )
                message_id = resp.json()["id"]
                resp = await c1.put(
                    f"/api/messages/{message_id}",
                    json={"title": "Durable 2", "body": "B", "attachmentURL": "a"},
                )
                expected = resp.json()

            # 关闭连接（模拟进程退出）
            await sg1.conn.close()

            # 第二次启动：验证数据完整
            app2 = create_app()
            sg2 = await create_store_group(db_path)
            app2.state.store_group = sg2

            async with AsyncClient(
                transport=ASGITransport(app=app2),
                base_url="http://test",
            ) as c2:
                resp = await c2.get(f"/api/messages/{message_id}")
                assert resp.status_code == 200
                assert resp.json() == expected

            await sg2.conn.close()
        finally:
            os.environ.pop("MSGBOARD_DB_PATH", None)


class TestLifespan:
    """lifespan 初始化与清理"""

    async def test_lifespan_opens_and_closes_store(self, tmp_path: Path, monkeypatch):
        db_path = tmp_path / "nested" / "sqlite" / "lifespan.db"
        monkeypatch.setenv("MSGBOARD_DB_PATH", str(db_path))

        from msgboard.gateway.main import create_app

        app = create_app()
        async with app.router.lifespan_context(app):
            store_group = app.state.store_group
            assert db_path.exists()
            cursor = await store_group.conn.execute("SELECT COUNT(*) FROM messages")
            row = await cursor.fetchone()
            assert row[0] == 0
