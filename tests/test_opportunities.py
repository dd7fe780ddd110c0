from findjob.models.opportunity import Opportunity


async def stored_opportunity(session_factory, opportunity_id) -> Opportunity:
    async with session_factory() as session:
        return await session.get(Opportunity, opportunity_id)


async def test_create_opportunity_starts_pending_with_zero_counters(employer, create_opportunity):
    client, _, company = employer
    opportunity = await create_opportunity(
        client, company["id"], status="approved", viewCount=50, applicationCount=9
    )
    assert opportunity["status"] == "pending"
    assert opportunity["viewCount"] == 0
    assert opportunity["applicationCount"] == 0
    assert opportunity["currency"] == "USD"


async def test_create_opportunity_for_foreign_company_is_forbidden(employer, make_user):
    _, _, company = employer
    other, _ = await make_user(user_type="employer")

    resp = await other.post("/api/opportunities", json={
        "companyId": company["id"], "title": "Fake", "description": "Fake",
        "type": "job", "province": "damascus",
    })
    assert resp.status_code == 403


async def test_create_opportunity_for_missing_company_is_forbidden(make_user):
    client, _ = await make_user(user_type="employer")
    resp = await client.post("/api/opportunities", json={
        "companyId": "missing", "title": "x", "description": "x",
        "type": "job", "province": "damascus",
    })
    assert resp.status_code == 403


async def test_create_opportunity_requires_province(employer):
    client, _, company = employer
    resp = await client.post("/api/opportunities", json={
        "companyId": company["id"], "title": "x", "description": "x", "type": "job",
    })
    assert resp.status_code == 400


async def test_filters_are_conjunctive(employer, create_opportunity, make_client):
    client, _, company = employer
    await create_opportunity(client, company["id"], type="job", province="damascus")
    await create_opportunity(client, company["id"], type="job", province="aleppo")
    await create_opportunity(client, company["id"], type="training", province="damascus")
    await create_opportunity(client, company["id"], type="volunteer", province="idlib")

    resp = await make_client().get("/api/opportunities", params={"type": "job", "province": "damascus"})
    assert resp.status_code == 200
    results = resp.json()
    assert len(results) == 1
    assert all(o["type"] == "job" and o["province"] == "damascus" for o in results)

    resp = await make_client().get("/api/opportunities", params={"province": "damascus"})
    assert len(resp.json()) == 2


async def test_invalid_filter_value_is_400(client):
    resp = await client.get("/api/opportunities", params={"province": "atlantis"})
    assert resp.status_code == 400


async def test_search_matches_title_or_description_case_insensitive(employer, create_opportunity, make_client):
    client, _, company = employer
    by_title = await create_opportunity(client, company["id"], title="Senior PYTHON Engineer", description="APIs")
    by_description = await create_opportunity(client, company["id"], title="Engineer", description="We use python daily")
    await create_opportunity(client, company["id"], title="Accountant", description="Excel and reports")

    resp = await make_client().get("/api/opportunities", params={"search": "Python"})
    ids = {o["id"] for o in resp.json()}
    assert ids == {by_title["id"], by_description["id"]}


async def test_search_treats_wildcards_literally(employer, create_opportunity, make_client):
    client, _, company = employer
    percent = await create_opportunity(client, company["id"], title="Salary 50% bonus", description="Sales")
    await create_opportunity(client, company["id"], title="Salary 50 USD", description="Sales")
    underscore = await create_opportunity(client, company["id"], title="Works with snake_case APIs", description="Backend")
    await create_opportunity(client, company["id"], title="Works with snakeXcase APIs", description="Backend")

    resp = await make_client().get("/api/opportunities", params={"search": "50%"})
    assert [o["id"] for o in resp.json()] == [percent["id"]]

    resp = await make_client().get("/api/opportunities", params={"search": "snake_case"})
    assert [o["id"] for o in resp.json()] == [underscore["id"]]


async def test_list_is_newest_first(employer, create_opportunity, make_client):
    client, _, company = employer
    first = await create_opportunity(client, company["id"], title="first")
    second = await create_opportunity(client, company["id"], title="second")
    third = await create_opportunity(client, company["id"], title="third")

    resp = await make_client().get("/api/opportunities", params={"companyId": company["id"]})
    assert [o["id"] for o in resp.json()] == [third["id"], second["id"], first["id"]]


async def test_get_increments_view_count_by_one_per_fetch(employer, create_opportunity, make_client, session_factory):
    client, _, company = employer
    opportunity = await create_opportunity(client, company["id"])
    visitor = make_client()

    for expected_before in range(3):
        resp = await visitor.get(f"/api/opportunities/{opportunity['id']}")
        assert resp.status_code == 200
        # 回應為讀取當下 (遞增前) 的值
        assert resp.json()["viewCount"] == expected_before

    stored = await stored_opportunity(session_factory, opportunity["id"])
    assert stored.view_count == 3


async def test_get_missing_opportunity_is_404(client):
    resp = await client.get("/api/opportunities/missing")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Opportunity not found"}


async def test_owner_can_update_content(employer, create_opportunity):
    client, _, company = employer
    opportunity = await create_opportunity(client, company["id"])

    resp = await client.patch(f"/api/opportunities/{opportunity['id']}", json={"salaryMin": 300, "salaryMax": 600})
    assert resp.status_code == 200
    assert resp.json()["salaryMin"] == 300
    assert resp.json()["title"] == opportunity["title"]


async def test_owner_patch_cannot_change_status(employer, create_opportunity, session_factory):
    client, _, company = employer
    opportunity = await create_opportunity(client, company["id"])

    resp = await client.patch(f"/api/opportunities/{opportunity['id']}", json={"status": "approved"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "pending"


async def test_owner_patch_cannot_null_required_fields(employer, create_opportunity, session_factory):
    client, _, company = employer
    opportunity = await create_opportunity(client, company["id"])

    for field in ("title", "description", "type", "province"):
        resp = await client.patch(f"/api/opportunities/{opportunity['id']}", json={field: None})
        assert resp.status_code == 400

    stored = await stored_opportunity(session_factory, opportunity["id"])
    assert stored.title == opportunity["title"]
    assert stored.description == opportunity["description"]
    assert stored.type.value == opportunity["type"]
    assert stored.province.value == opportunity["province"]


async def test_non_owner_cannot_update_opportunity(employer, create_opportunity, make_user, session_factory):
    client, _, company = employer
    opportunity = await create_opportunity(client, company["id"])
    intruder, _ = await make_user(user_type="employer")

    resp = await intruder.patch(f"/api/opportunities/{opportunity['id']}", json={"title": "Hijacked"})
    assert resp.status_code == 403

    stored = await stored_opportunity(session_factory, opportunity["id"])
    assert stored.title == opportunity["title"]


async def test_update_missing_opportunity_is_404(make_user):
    client, _ = await make_user(user_type="employer")
    resp = await client.patch("/api/opportunities/missing", json={"title": "x"})
    assert resp.status_code == 404


async def test_admin_moderation_transitions(employer, create_opportunity, make_admin):
    client, _, company = employer
    opportunity = await create_opportunity(client, company["id"])
    admin, _ = await make_admin()
    url = f"/api/opportunities/{opportunity['id']}/status"

    resp = await admin.patch(url, json={"status": "rejected"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "rejected"

    resp = await admin.patch(url, json={"status": "pending"})
    assert resp.json()["status"] == "pending"

    resp = await admin.patch(url, json={"status": "approved"})
    assert resp.json()["status"] == "approved"

    # 擁有者收到審核通知
    notifications = (await client.get("/api/notifications")).json()
    assert any(n["type"] == "opportunity" for n in notifications)


async def test_owner_can_only_close_approved_opportunity(employer, create_opportunity, make_admin):
    client, _, company = employer
    opportunity = await create_opportunity(client, company["id"])
    url = f"/api/opportunities/{opportunity['id']}/status"

    # 擁有者不能自行審核
    resp = await client.patch(url, json={"status": "approved"})
    assert resp.status_code == 403

    admin, _ = await make_admin()
    await admin.patch(url, json={"status": "approved"})

    resp = await client.patch(url, json={"status": "expired"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "expired"


async def test_illegal_transition_is_400(employer, create_opportunity, make_admin):
    client, _, company = employer
    opportunity = await create_opportunity(client, company["id"])
    admin, _ = await make_admin()

    resp = await admin.patch(f"/api/opportunities/{opportunity['id']}/status", json={"status": "expired"})
    assert resp.status_code == 400


async def test_stranger_cannot_change_status(employer, create_opportunity, make_user):
    client, _, company = employer
    opportunity = await create_opportunity(client, company["id"])
    stranger, _ = await make_user()

    resp = await stranger.patch(f"/api/opportunities/{opportunity['id']}/status", json={"status": "expired"})
    assert resp.status_code == 403
