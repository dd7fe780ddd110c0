from findjob.models.company import Company


async def test_create_company_stamps_owner_from_session(employer):
    _, user, company = employer
    assert company["userId"] == user["id"]
    assert company["nameEn"] == "Test Co"
    assert company["isVerified"] is False


async def test_create_company_requires_session(client):
    resp = await client.post("/api/companies", json={"name": "Anon"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized"}


async def test_client_cannot_choose_owner(make_user):
    client, user = await make_user(user_type="employer")
    _, other = await make_user()

    resp = await client.post("/api/companies", json={"name": "Mine", "userId": other["id"]})
    assert resp.status_code == 200
    assert resp.json()["userId"] == user["id"]


async def test_list_companies_by_user(employer, make_client):
    _, user, company = employer

    resp = await make_client().get("/api/companies", params={"userId": user["id"]})
    assert [c["id"] for c in resp.json()] == [company["id"]]

    # 未帶 userId 時回傳空陣列
    resp = await make_client().get("/api/companies")
    assert resp.status_code == 200
    assert resp.json() == []


async def test_get_company(employer, make_client):
    _, _, company = employer
    resp = await make_client().get(f"/api/companies/{company['id']}")
    assert resp.status_code == 200
    assert resp.json()["name"] == company["name"]

    resp = await make_client().get("/api/companies/missing")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Company not found"}


async def test_owner_can_update_company(employer):
    client, _, company = employer
    resp = await client.patch(f"/api/companies/{company['id']}", json={"website": "https://example.sy"})
    assert resp.status_code == 200
    assert resp.json()["website"] == "https://example.sy"
    assert resp.json()["name"] == company["name"]


async def test_non_owner_cannot_update_company(employer, make_user, session_factory):
    _, _, company = employer
    intruder, _ = await make_user(user_type="employer")

    resp = await intruder.patch(f"/api/companies/{company['id']}", json={"name": "Stolen"})
    assert resp.status_code == 403

    async with session_factory() as session:
        stored = await session.get(Company, company["id"])
    assert stored.name == company["name"]


async def test_update_missing_company_is_404(make_user):
    client, _ = await make_user(user_type="employer")
    resp = await client.patch("/api/companies/missing", json={"name": "x"})
    assert resp.status_code == 404


async def test_dashboard_totals(employer, make_user, create_opportunity):
    client, _, company = employer
    first = await create_opportunity(client, company["id"])
    await create_opportunity(client, company["id"], title="Second")

    applicant, _ = await make_user()
    await applicant.post("/api/applications", json={"opportunityId": first["id"]})
    await applicant.get(f"/api/opportunities/{first['id']}")
    await applicant.get(f"/api/opportunities/{first['id']}")

    resp = await client.get(f"/api/companies/{company['id']}/dashboard")
    assert resp.status_code == 200
    assert resp.json() == {
        "totalOpportunities": 2,
        "totalApplications": 1,
        "totalViews": 2,
        "pendingApplications": 1,
    }


async def test_dashboard_is_owner_only(employer, make_user):
    _, _, company = employer
    other, _ = await make_user()
    resp = await other.get(f"/api/companies/{company['id']}/dashboard")
    assert resp.status_code == 403


async def test_patch_cannot_null_company_name(employer, session_factory):
    client, _, company = employer
    resp = await client.patch(f"/api/companies/{company['id']}", json={"name": None})
    assert resp.status_code == 400
    assert "error" in resp.json()

    async with session_factory() as session:
        stored = await session.get(Company, company["id"])
    assert stored.name == company["name"]
