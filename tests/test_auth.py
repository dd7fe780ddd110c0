from datetime import timedelta

from sqlalchemy import func, select, update

from findjob.core.database import utcnow
from findjob.models.user import User, UserSession


async def count_users(session_factory) -> int:
    async with session_factory() as session:
        return (await session.execute(select(func.count(User.id)))).scalar_one()


async def test_register_returns_user_without_password_and_opens_session(client):
    resp = await client.post("/api/auth/register", json={
        "email": "rami@example.com",
        "username": "rami",
        "fullName": "Rami Haddad",
        "password": "secret123",
        "confirmPassword": "secret123",
    })
    assert resp.status_code == 200
    user = resp.json()["user"]
    assert user["email"] == "rami@example.com"
    assert user["userType"] == "individual"
    assert user["preferredLanguage"] == "ar"
    assert "password" not in user
    assert "passwordHash" not in user

    # cookie 已寫入，/me 直接回傳身分
    me = await client.get("/api/auth/me")
    assert me.json()["user"]["id"] == user["id"]
    assert me.json()["user"]["fullName"] == "Rami Haddad"


async def test_session_cookie_is_http_only(client):
    resp = await client.post("/api/auth/register", json={
        "email": "a@example.com", "username": "aaa", "fullName": "Aa", "password": "secret123",
    })
    cookie_header = resp.headers["set-cookie"].lower()
    assert "httponly" in cookie_header
    assert "max-age=2592000" in cookie_header


async def test_register_duplicate_email_is_rejected(make_user, client, session_factory):
    await make_user(email="dup@example.com")
    before = await count_users(session_factory)

    resp = await client.post("/api/auth/register", json={
        "email": "dup@example.com", "username": "another", "fullName": "Other", "password": "secret123",
    })
    assert resp.status_code == 400
    assert "error" in resp.json()
    assert await count_users(session_factory) == before


async def test_register_duplicate_username_is_rejected(make_user, client, session_factory):
    await make_user(username="taken")
    before = await count_users(session_factory)

    resp = await client.post("/api/auth/register", json={
        "email": "fresh@example.com", "username": "taken", "fullName": "Other", "password": "secret123",
    })
    assert resp.status_code == 400
    assert await count_users(session_factory) == before


async def test_register_validation_errors_are_400_with_issue_list(client, session_factory):
    resp = await client.post("/api/auth/register", json={
        "email": "not-an-email", "username": "ab", "fullName": "X", "password": "123",
    })
    assert resp.status_code == 400
    issues = resp.json()["error"]
    assert isinstance(issues, list)
    assert len(issues) >= 4
    assert await count_users(session_factory) == 0


async def test_register_cannot_create_admin(client):
    resp = await client.post("/api/auth/register", json={
        "email": "x@example.com", "username": "xxx", "fullName": "Xx",
        "password": "secret123", "userType": "admin",
    })
    assert resp.status_code == 400


async def test_login_failures_share_one_message(make_user, make_client):
    await make_user(email="known@example.com")

    unknown = await make_client().post(
        "/api/auth/login", json={"email": "nobody@example.com", "password": "secret123"}
    )
    wrong = await make_client().post(
        "/api/auth/login", json={"email": "known@example.com", "password": "wrong-password"}
    )
    assert unknown.status_code == 401
    assert wrong.status_code == 401
    assert unknown.json() == wrong.json() == {"error": "Invalid credentials"}


async def test_login_rejects_account_without_password(make_client, session_factory):
    async with session_factory() as session:
        session.add(User(
            email="google@example.com", username="googler", full_name="G User",
            google_id="g-123", password_hash=None,
        ))
        await session.commit()

    resp = await make_client().post(
        "/api/auth/login", json={"email": "google@example.com", "password": "anything"}
    )
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid credentials"}


async def test_login_then_me_then_logout(make_user, make_client):
    _, user = await make_user(email="login@example.com")
    client = make_client()

    resp = await client.post("/api/auth/login", json={"email": "login@example.com", "password": "secret123"})
    assert resp.status_code == 200
    identity = resp.json()["user"]
    assert set(identity) == {"id", "email", "username", "fullName", "userType"}
    assert identity["id"] == user["id"]

    resp = await client.post("/api/auth/logout")
    assert resp.json() == {"success": True}

    me = await client.get("/api/auth/me")
    assert me.status_code == 200
    assert me.json() == {"user": None}


async def test_logout_is_idempotent(client):
    for _ in range(2):
        resp = await client.post("/api/auth/logout")
        assert resp.status_code == 200
        assert resp.json() == {"success": True}


async def test_logout_deletes_server_side_session(make_user, session_factory):
    client, _ = await make_user()
    await client.post("/api/auth/logout")

    async with session_factory() as session:
        remaining = (await session.execute(select(func.count(UserSession.id)))).scalar_one()
    assert remaining == 0


async def test_expired_session_is_treated_as_anonymous(make_user, session_factory):
    client, _ = await make_user()

    async with session_factory() as session:
        await session.execute(
            update(UserSession).values(expires_at=utcnow() - timedelta(minutes=1))
        )
        await session.commit()

    me = await client.get("/api/auth/me")
    assert me.json() == {"user": None}

    resp = await client.get("/api/cvs")
    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized"}

    # 過期的 Session 在查詢時被刪除
    async with session_factory() as session:
        remaining = (await session.execute(select(func.count(UserSession.id)))).scalar_one()
    assert remaining == 0


async def test_tampered_cookie_is_ignored(client):
    client.cookies.set("findjob_session", "not-a-signed-token")
    me = await client.get("/api/auth/me")
    assert me.status_code == 200
    assert me.json() == {"user": None}
