"""Topic Routes - agenda items and their automatically created votings.

Invariants:
    - Creating a topic creates its voting with one NOT_VOTED voter per registered participant
    - A topic of another meeting is a 404 OWNERSHIP_MISMATCH
    - Deleting a topic removes its voting
"""

API = "/api/v1/approval"


async def test_create_topic_creates_voting_and_voters(
    client, make_company, make_participant, make_meeting, register,
):
    company = await make_company()
    cid = company["id"]
    a = await make_participant(cid, name="A", share=60)
    b = await make_participant(cid, name="B", share=40)
    meeting = await make_meeting(cid)
    await register(cid, meeting["id"], a["id"], b["id"])

    res = await client.post(
        f"{API}/{cid}/meeting/{meeting['id']}/topic", json={"title": "Dividends"},
    )
    assert res.status_code == 201
    topic = res.json()
    assert topic["meeting_id"] == meeting["id"]

    res = await client.get(f"{API}/{cid}/{meeting['id']}/{topic['id']}/voting")
    assert res.status_code == 200
    voting = res.json()
    assert voting["topic_id"] == topic["id"]
    assert voting["is_accepted"] is False
    assert len(voting["voter_ids"]) == 2
    assert voting["counts"] == {"NOT_VOTED": 2, "YES": 0, "NO": 0, "ABSTAINED": 0}


async def test_topic_without_participants_has_empty_voting(
    client, make_company, make_meeting, make_topic,
):
    company = await make_company()
    meeting = await make_meeting(company["id"])
    topic = await make_topic(company["id"], meeting["id"])

    res = await client.get(f"{API}/{company['id']}/{meeting['id']}/{topic['id']}/voting")
    assert res.status_code == 200
    assert res.json()["voter_ids"] == []


async def test_list_and_search_topics(client, make_company, make_meeting, make_topic):
    company = await make_company()
    cid = company["id"]
    meeting = await make_meeting(cid)
    for title in ("Budget", "Auditor", "Dividends"):
        await make_topic(cid, meeting["id"], title=title)

    base = f"{API}/{cid}/meeting/{meeting['id']}/topic"
    res = await client.get(base)
    assert [t["title"] for t in res.json()["items"]] == ["Auditor", "Budget", "Dividends"]

    res = await client.get(f"{base}/search", params={"criteria": "divid"})
    assert [t["title"] for t in res.json()["items"]] == ["Dividends"]

    res = await client.get(f"{base}/search", params={"criteria": ""})
    assert res.json()["total"] == 0


async def test_topic_of_other_meeting_is_404(client, make_company, make_meeting, make_topic):
    company = await make_company()
    cid = company["id"]
    first = await make_meeting(cid, date="2026-01-01")
    second = await make_meeting(cid, date="2026-02-01")
    topic = await make_topic(cid, first["id"])

    res = await client.get(f"{API}/{cid}/meeting/{second['id']}/topic/{topic['id']}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "OWNERSHIP_MISMATCH"


async def test_patch_topic_title(client, make_company, make_meeting, make_topic):
    company = await make_company()
    meeting = await make_meeting(company["id"])
    topic = await make_topic(company["id"], meeting["id"], title="Old")

    res = await client.patch(
        f"{API}/{company['id']}/meeting/{meeting['id']}/topic/{topic['id']}",
        json={"title": "New"},
    )
    assert res.status_code == 200
    assert res.json()["title"] == "New"


async def test_delete_topic_removes_voting(client, make_company, make_meeting, make_topic):
    company = await make_company()
    cid = company["id"]
    meeting = await make_meeting(cid)
    topic = await make_topic(cid, meeting["id"])

    res = await client.delete(f"{API}/{cid}/meeting/{meeting['id']}/topic/{topic['id']}")
    assert res.status_code == 204

    res = await client.get(f"{API}/{cid}/{meeting['id']}/{topic['id']}/voting")
    assert res.status_code == 404
