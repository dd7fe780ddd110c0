import itertools
import os

# 必須在匯入 app 之前設定 (Settings 於 import 時讀取環境變數)
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SESSION_SECRET_KEY"] = "test-secret-key"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from findjob.core.database import Base, get_db
from findjob.core.security import get_password_hash
from findjob.main import app
from findjob.models.enums import UserType
from findjob.models.user import User


@pytest_asyncio.fixture
async def engine():
    # 每個測試一個全新的 in-memory 資料庫
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def make_client(session_factory):
    """
    建立獨立的 AsyncClient (各自的 cookie jar = 各自的瀏覽器)
    """
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    clients = []

    def _make() -> AsyncClient:
        client = AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def make_user(make_client):
    """
    註冊一位新使用者並回傳 (已登入的 client, 使用者 JSON)
    """
    counter = itertools.count(1)

    async def _make(user_type: str = "individual", **overrides):
        n = next(counter)
        payload = {
            "email": f"user{n}@example.com",
            "username": f"user{n}",
            "fullName": f"User {n}",
            "password": "secret123",
            "confirmPassword": "secret123",
            "userType": user_type,
            "province": "damascus",
        }
        payload.update(overrides)
        client = make_client()
        resp = await client.post("/api/auth/register", json=payload)
        assert resp.status_code == 200, resp.text
        return client, resp.json()["user"]

    return _make


@pytest.fixture
def make_admin(make_client, session_factory):
    """
    管理員無法透過註冊建立，直接寫入資料庫後登入
    """
    async def _make():
        async with session_factory() as session:
            admin = User(
                email="admin@example.com",
                username="admin",
                full_name="Site Admin",
                user_type=UserType.admin,
                password_hash=get_password_hash("adminpass"),
            )
            session.add(admin)
            await session.commit()

        client = make_client()
        resp = await client.post(
            "/api/auth/login",
            json={"email": "admin@example.com", "password": "adminpass"}
        )
        assert resp.status_code == 200, resp.text
        return client, resp.json()["user"]

    return _make


@pytest.fixture
def create_company():
    async def _create(client: AsyncClient, **overrides):
        payload = {"name": "شركة الاختبار", "nameEn": "Test Co", "province": "aleppo"}
        payload.update(overrides)
        resp = await client.post("/api/companies", json=payload)
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _create


@pytest.fixture
def create_opportunity():
    async def _create(client: AsyncClient, company_id: str, **overrides):
        payload = {
            "companyId": company_id,
            "title": "Backend Developer",
            "description": "Build APIs for our platform",
            "type": "job",
            "province": "damascus",
            "category": "it",
            "requirements": "Python, SQL, Docker",
        }
        payload.update(overrides)
        resp = await client.post("/api/opportunities", json=payload)
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _create


@pytest_asyncio.fixture
async def employer(make_user, create_company):
    """雇主 + 一間公司"""
    client, user = await make_user(user_type="employer")
    company = await create_company(client)
    return client, user, company
