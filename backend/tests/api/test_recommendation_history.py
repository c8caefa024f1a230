"""GET /api/recommendations — read side of the audit log."""


async def _submit(client, **body):
    payload = {"age": 30, "income": 50000, "dependents": 0, "riskTolerance": "Medium"}
    payload.update(body)
    res = await client.post("/api/recommendation", json=payload)
    assert res.status_code == 200


async def test_list_is_empty_without_submissions(client):
    res = await client.get("/api/recommendations")
    assert res.status_code == 200
    assert res.json() == {
        "recommendations": [], "pagination": {"limit": 10, "offset": 0},
    }


async def test_list_returns_newest_first_with_inputs(client):
    await _submit(client, age=30)
    await _submit(client, age=60, income=30000, riskTolerance="High")

    res = await client.get("/api/recommendations")
    records = res.json()["recommendations"]
    assert [r["recommendation_type"] for r in records] == ["Whole Life", "Term Life"]
    assert records[0]["coverage_amount"] == 360000
    assert records[0]["applicant"]["age"] == 60
    assert records[0]["applicant"]["risk_tolerance"] == "High"


async def test_list_respects_limit_and_offset(client):
    for age in (25, 45, 65):
        await _submit(client, age=age)

    res = await client.get("/api/recommendations", params={"limit": 1, "offset": 1})
    records = res.json()["recommendations"]
    assert len(records) == 1
    assert records[0]["applicant"]["age"] == 45


async def test_list_rejects_out_of_range_limit(client):
    res = await client.get("/api/recommendations", params={"limit": 0})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request data"


async def test_get_returns_single_record(client):
    await _submit(client, age=45, income=80000, dependents=3, riskTolerance="Low")
    listed = (await client.get("/api/recommendations")).json()["recommendations"]

    res = await client.get(f"/api/recommendations/{listed[0]['id']}")
    assert res.status_code == 200
    data = res.json()
    assert data["coverage_amount"] == 640000
    assert data["duration_years"] == 20
    assert data["applicant"]["dependents"] == 3


async def test_get_unknown_id_returns_404(client):
    res = await client.get("/api/recommendations/999")
    assert res.status_code == 404
    assert res.json()["code"] == "RESOURCE_NOT_FOUND"
