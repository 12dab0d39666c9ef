"""Meeting Participant Routes - registration, potentials and removal.

Invariants:
    - Potentials are active, type-eligible, unregistered participants with id None
    - Registering twice is a 400
    - Registering after topics exist seats NOT_VOTED voters on them
    - Records are addressed by participant id
"""

API = "/api/v1/approval"


def _base(company_id, meeting_id):
    return f"{API}/{company_id}/meeting/{meeting_id}/participants"


async def test_potentials_filter_by_type_activity_and_registration(
    client, make_company, make_participant, make_meeting, register,
):
    company = await make_company()
    cid = company["id"]
    owner = await make_participant(cid, name="Owner")
    registered = await make_participant(cid, name="Registered")
    await make_participant(cid, name="Inactive", is_active=False)
    await make_participant(cid, name="Board", type="MEMBER_OF_BOARD")
    meeting = await make_meeting(cid, type="FMS")
    await register(cid, meeting["id"], registered["id"])

    res = await client.get(f"{_base(cid, meeting['id'])}/potentials")
    assert res.status_code == 200
    body = res.json()
    assert [p["participant"]["id"] for p in body] == [owner["id"]]
    assert body[0]["id"] is None
    assert body[0]["is_present"] is False
    assert body[0]["meeting_id"] == meeting["id"]


async def test_board_meeting_potentials_are_board_members(
    client, make_company, make_participant, make_meeting,
):
    company = await make_company()
    cid = company["id"]
    await make_participant(cid, name="Owner")
    board = await make_participant(cid, name="Board", type="MEMBER_OF_BOARD")
    meeting = await make_meeting(cid, type="BOD")

    res = await client.get(f"{_base(cid, meeting['id'])}/potentials")
    assert [p["participant"]["id"] for p in res.json()] == [board["id"]]


async def test_register_returns_created_records(
    client, make_company, make_participant, make_meeting,
):
    company = await make_company()
    cid = company["id"]
    p = await make_participant(cid)
    meeting = await make_meeting(cid)

    res = await client.post(_base(cid, meeting["id"]), json={
        "potential_participants": [{"participant_id": p["id"], "is_present": True}],
    })
    assert res.status_code == 201
    record = res.json()[0]
    assert record["id"] is not None
    assert record["participant"]["name"] == p["name"]
    assert record["is_present"] is True


async def test_register_twice_rejected(
    client, make_company, make_participant, make_meeting, register,
):
    company = await make_company()
    cid = company["id"]
    p = await make_participant(cid)
    meeting = await make_meeting(cid)
    await register(cid, meeting["id"], p["id"])

    res = await client.post(_base(cid, meeting["id"]), json={
        "potential_participants": [{"participant_id": p["id"]}],
    })
    assert res.status_code == 400
    assert res.json()["error"]["context"]["resource_type"] == "MeetingParticipant"


async def test_register_stranger_rejected(
    client, make_company, make_participant, make_meeting,
):
    company = await make_company()
    other = await make_company(title="Other", inn=9999999999)
    stranger = await make_participant(other["id"])
    meeting = await make_meeting(company["id"])

    res = await client.post(_base(company["id"], meeting["id"]), json={
        "potential_participants": [{"participant_id": stranger["id"]}],
    })
    assert res.status_code == 404


async def test_register_seats_voters_on_existing_topics(
    client, make_company, make_participant, make_meeting, make_topic, register,
):
    company = await make_company()
    cid = company["id"]
    p = await make_participant(cid)
    meeting = await make_meeting(cid)
    topic = await make_topic(cid, meeting["id"])

    await register(cid, meeting["id"], p["id"])

    res = await client.get(f"{API}/{cid}/{meeting['id']}/{topic['id']}/voting/voters")
    assert res.status_code == 200
    voters = res.json()
    assert len(voters) == 1
    assert voters[0]["vote"] == "NOT_VOTED"
    assert voters[0]["meeting_participant"]["participant"]["id"] == p["id"]


async def test_get_and_remove_by_participant_id(
    client, make_company, make_participant, make_meeting, register,
):
    company = await make_company()
    cid = company["id"]
    p = await make_participant(cid)
    meeting = await make_meeting(cid)
    await register(cid, meeting["id"], p["id"])

    res = await client.get(f"{_base(cid, meeting['id'])}/{p['id']}")
    assert res.status_code == 200
    assert res.json()["participant"]["id"] == p["id"]

    res = await client.delete(f"{_base(cid, meeting['id'])}/{p['id']}")
    assert res.status_code == 204

    res = await client.get(f"{_base(cid, meeting['id'])}/{p['id']}")
    assert res.status_code == 404


async def test_remove_unregistered_is_404(client, make_company, make_meeting):
    company = await make_company()
    meeting = await make_meeting(company["id"])
    res = await client.delete(f"{_base(company['id'], meeting['id'])}/5")
    assert res.status_code == 404
