async def notify(sender, receiver_id, count):
    for i in range(count):
        await sender.post("/api/messages", json={"receiverId": receiver_id, "content": f"msg {i}"})


async def test_list_is_scoped_to_caller_newest_first(make_user):
    alice, alice_user = await make_user()
    bob, bob_user = await make_user()
    await notify(alice, bob_user["id"], 2)
    await notify(bob, alice_user["id"], 1)

    notifications = (await bob.get("/api/notifications")).json()
    assert len(notifications) == 2
    assert all(n["userId"] == bob_user["id"] for n in notifications)
    assert notifications[0]["createdAt"] >= notifications[1]["createdAt"]
    assert notifications[0]["content"].endswith("msg 1")


async def test_mark_single_notification_read(make_user):
    alice, _ = await make_user()
    bob, bob_user = await make_user()
    await notify(alice, bob_user["id"], 1)
    notification = (await bob.get("/api/notifications")).json()[0]
    url = f"/api/notifications/{notification['id']}/read"

    # 不能標記別人的通知
    assert (await alice.patch(url)).status_code == 403

    resp = await bob.patch(url)
    assert resp.json() == {"success": True}
    assert (await bob.get("/api/notifications")).json()[0]["isRead"] is True

    assert (await bob.patch("/api/notifications/missing/read")).status_code == 404


async def test_mark_all_read_only_touches_caller(make_user):
    alice, alice_user = await make_user()
    bob, bob_user = await make_user()
    await notify(alice, bob_user["id"], 3)
    await notify(bob, alice_user["id"], 1)

    resp = await bob.patch("/api/notifications/read-all")
    assert resp.json() == {"success": True}

    assert all(n["isRead"] for n in (await bob.get("/api/notifications")).json())
    assert not any(n["isRead"] for n in (await alice.get("/api/notifications")).json())


async def test_notifications_require_session(client):
    assert (await client.get("/api/notifications")).status_code == 401
    assert (await client.patch("/api/notifications/read-all")).status_code == 401
