"""Meeting Routes - meetings of one company.

Invariants:
    - One meeting per (company, type, date)
    - Chairman and secretary must belong to the company
    - Listing is newest first
    - Changing the type clears meeting participants and their voter records
"""

API = "/api/v1/approval"


async def test_create_meeting_with_roles(client, make_company, make_participant):
    company = await make_company()
    chair = await make_participant(company["id"], name="Chair")
    secretary = await make_participant(company["id"], name="Secretary")

    res = await client.post(f"{API}/{company['id']}/meeting", json={
        "type": "Совет директоров", "date": "2026-04-01", "address": "Office",
        "chairman_id": chair["id"], "secretary_id": secretary["id"],
    })
    assert res.status_code == 201
    body = res.json()
    assert body["type"] == "BOD"
    assert body["date"] == "2026-04-01"
    assert body["chairman_id"] == chair["id"]
    assert body["secretary_id"] == secretary["id"]


async def test_chairman_from_other_company_rejected(
    client, make_company, make_participant,
):
    company = await make_company()
    other = await make_company(title="Other", inn=9999999999)
    stranger = await make_participant(other["id"])

    res = await client.post(f"{API}/{company['id']}/meeting", json={
        "type": "BOD", "date": "2026-04-01", "address": "Office",
        "chairman_id": stranger["id"],
    })
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "OWNERSHIP_MISMATCH"


async def test_duplicate_meeting_rejected(client, make_company, make_meeting):
    company = await make_company()
    await make_meeting(company["id"], type="FMP", date="2026-04-01")
    res = await client.post(f"{API}/{company['id']}/meeting", json={
        "type": "FMP", "date": "2026-04-01", "address": "Elsewhere",
    })
    assert res.status_code == 400
    assert res.json()["error"]["context"]["resource_type"] == "Meeting"


async def test_unknown_meeting_type_is_404(client, make_company):
    company = await make_company()
    res = await client.post(f"{API}/{company['id']}/meeting", json={
        "type": "AGM", "date": "2026-04-01", "address": "Office",
    })
    assert res.status_code == 404


async def test_list_newest_first(client, make_company, make_meeting):
    company = await make_company()
    await make_meeting(company["id"], date="2026-01-10")
    await make_meeting(company["id"], date="2026-03-10")
    await make_meeting(company["id"], date="2026-02-10")

    res = await client.get(f"{API}/{company['id']}/meeting")
    assert [m["date"] for m in res.json()["items"]] == [
        "2026-03-10", "2026-02-10", "2026-01-10",
    ]
    assert res.json()["total"] == 3


async def test_meeting_of_other_company_is_404(client, make_company, make_meeting):
    company = await make_company()
    other = await make_company(title="Other", inn=9999999999)
    meeting = await make_meeting(other["id"])

    res = await client.get(f"{API}/{company['id']}/meeting/{meeting['id']}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "OWNERSHIP_MISMATCH"


async def test_patch_address_keeps_participants(
    client, make_company, make_participant, make_meeting, register,
):
    company = await make_company()
    p = await make_participant(company["id"])
    meeting = await make_meeting(company["id"])
    await register(company["id"], meeting["id"], p["id"])

    res = await client.patch(
        f"{API}/{company['id']}/meeting/{meeting['id']}", json={"address": "New place"},
    )
    assert res.status_code == 200
    assert res.json()["address"] == "New place"

    res = await client.get(f"{API}/{company['id']}/meeting/{meeting['id']}/participants")
    assert len(res.json()) == 1


async def test_type_change_clears_participants(
    client, make_company, make_participant, make_meeting, register,
):
    company = await make_company()
    p = await make_participant(company["id"])
    meeting = await make_meeting(company["id"], type="FMP")
    await register(company["id"], meeting["id"], p["id"])

    res = await client.patch(
        f"{API}/{company['id']}/meeting/{meeting['id']}", json={"type": "BOD"},
    )
    assert res.status_code == 200
    assert res.json()["type"] == "BOD"

    res = await client.get(f"{API}/{company['id']}/meeting/{meeting['id']}/participants")
    assert res.json() == []


async def test_delete_meeting(client, make_company, make_meeting):
    company = await make_company()
    meeting = await make_meeting(company["id"])

    res = await client.delete(f"{API}/{company['id']}/meeting/{meeting['id']}")
    assert res.status_code == 204
    res = await client.get(f"{API}/{company['id']}/meeting/{meeting['id']}")
    assert res.status_code == 404


async def test_patch_onto_taken_date_rejected(client, make_company, make_meeting):
    company = await make_company()
    await make_meeting(company["id"], type="FMP", date="2026-04-01")
    other = await make_meeting(company["id"], type="FMP", date="2026-04-02")

    res = await client.patch(
        f"{API}/{company['id']}/meeting/{other['id']}", json={"date": "2026-04-01"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "ALREADY_EXISTS"

    res = await client.get(f"{API}/{company['id']}/meeting/{other['id']}")
    assert res.json()["date"] == "2026-04-02"


async def test_type_change_removes_voters(
    client, make_company, make_participant, make_meeting, register, make_topic,
):
    company = await make_company()
    cid = company["id"]
    p = await make_participant(cid)
    meeting = await make_meeting(cid, type="FMP")
    await register(cid, meeting["id"], p["id"])
    topic = await make_topic(cid, meeting["id"])
    voting = f"{API}/{cid}/{meeting['id']}/{topic['id']}/voting"
    assert len((await client.get(f"{voting}/voters")).json()) == 1

    res = await client.patch(f"{API}/{cid}/meeting/{meeting['id']}", json={"type": "BOD"})
    assert res.status_code == 200

    res = await client.get(f"{voting}/voters")
    assert res.status_code == 200
    assert res.json() == []
