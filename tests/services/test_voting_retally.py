"""Voting Re-tally - is_accepted follows the voter set, not only the ballots.

Invariants:
    - Removing a meeting participant drops its vote from the stored outcome
    - Changing the meeting type removes every voter and rejects the voting
    - Hard-deleting a participant re-tallies the votings it sat in
    - Registering more board members dilutes an earlier head-count majority
"""

import pytest

API = "/api/v1/approval"


@pytest.fixture
def seated_meeting(make_company, make_participant, make_meeting, register, make_topic):
    """Company + meeting + registered participants + one topic.

    Returns a dict with cid, meeting id, voting url and participants by name.
    """
    async def _seat(meeting_type, members):
        company = await make_company()
        cid = company["id"]
        ptype = "MEMBER_OF_BOARD" if meeting_type == "BOD" else "OWNER"
        people = {
            name: await make_participant(cid, name=name, share=share, type=ptype)
            for name, share in members
        }
        meeting = await make_meeting(cid, type=meeting_type)
        await register(cid, meeting["id"], *[p["id"] for p in people.values()])
        topic = await make_topic(cid, meeting["id"])
        return {
            "cid": cid,
            "mid": meeting["id"],
            "url": f"{API}/{cid}/{meeting['id']}/{topic['id']}/voting",
            "people": people,
        }
    return _seat


async def _vote(client, url, **votes):
    res = await client.get(f"{url}/voters")
    ids = {v["meeting_participant"]["participant"]["name"]: v["id"] for v in res.json()}
    res = await client.post(f"{url}/make_vote", json={"voters": [
        {"id": ids[name], "vote": vote} for name, vote in votes.items()
    ]})
    assert res.status_code == 201, res.text
    return res.json()


async def test_removing_meeting_participant_retallies(client, seated_meeting):
    seat = await seated_meeting("FMP", [("Major", 60.0), ("Minor", 40.0)])
    assert (await _vote(client, seat["url"], Major="YES", Minor="NO"))["is_accepted"] is True

    major = seat["people"]["Major"]
    res = await client.delete(
        f"{API}/{seat['cid']}/meeting/{seat['mid']}/participants/{major['id']}",
    )
    assert res.status_code == 204

    body = (await client.get(seat["url"])).json()
    assert body["is_accepted"] is False
    assert len(body["voter_ids"]) == 1
    assert body["counts"]["YES"] == 0


async def test_meeting_type_change_retallies(client, seated_meeting):
    seat = await seated_meeting("FMP", [("Major", 60.0), ("Minor", 40.0)])
    assert (await _vote(client, seat["url"], Major="YES"))["is_accepted"] is True

    res = await client.patch(
        f"{API}/{seat['cid']}/meeting/{seat['mid']}", json={"type": "FMS"},
    )
    assert res.status_code == 200

    body = (await client.get(seat["url"])).json()
    assert body["is_accepted"] is False
    assert body["voter_ids"] == []
    assert (await client.get(f"{seat['url']}/voters")).json() == []


async def test_hard_delete_of_participant_retallies(client, seated_meeting):
    seat = await seated_meeting("FMP", [("Major", 60.0), ("Minor", 40.0)])
    assert (await _vote(client, seat["url"], Major="YES", Minor="NO"))["is_accepted"] is True

    major = seat["people"]["Major"]
    path = f"{API}/{seat['cid']}/participant/{major['id']}"
    assert (await client.delete(path)).status_code == 204  # deactivates
    assert (await client.get(seat["url"])).json()["is_accepted"] is True
    assert (await client.delete(path)).status_code == 204  # removes

    body = (await client.get(seat["url"])).json()
    assert body["is_accepted"] is False
    assert len(body["voter_ids"]) == 1


async def test_registering_board_members_retallies(
    client, seated_meeting, make_participant, register,
):
    seat = await seated_meeting("BOD", [("Solo", 0.0)])
    assert (await _vote(client, seat["url"], Solo="YES"))["is_accepted"] is True

    late = [
        await make_participant(seat["cid"], name=name, share=0.0, type="MEMBER_OF_BOARD")
        for name in ("Late1", "Late2")
    ]
    await register(seat["cid"], seat["mid"], *[p["id"] for p in late])

    body = (await client.get(seat["url"])).json()
    assert body["is_accepted"] is False
    assert body["counts"]["YES"] == 1
    assert body["counts"]["NOT_VOTED"] == 2
