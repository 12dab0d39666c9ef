"""Domain Types - verifies enum codes, labels and label resolution."""

from approval.core.domain_types import (
    CompanyType, MeetingType, ParticipantType, VoteType, eligible_participant_type,
)


def test_enums_serialize_to_code():
    assert CompanyType.LLC.value == "LLC"
    assert CompanyType.LLC == "LLC"
    assert VoteType.NOT_VOTED.value == "NOT_VOTED"


def test_members_carry_russian_labels():
    assert CompanyType.JSC.label == "Акционерное общество"
    assert MeetingType.BOD.label == "Совет директоров"
    assert ParticipantType.OWNER.label == "Собственник"
    assert VoteType.YES.label == "ЗА"


def test_from_label_accepts_code_case_insensitively():
    assert MeetingType.from_label("fms") is MeetingType.FMS
    assert ParticipantType.from_label("member_of_board") is ParticipantType.MEMBER_OF_BOARD


def test_from_label_accepts_exact_label():
    assert VoteType.from_label("ВОЗДЕРЖАЛСЯ") is VoteType.ABSTAINED
    assert CompanyType.from_label("Общество с ограниченной ответственностью") is CompanyType.LLC


def test_from_label_unknown_returns_none():
    assert CompanyType.from_label("GmbH") is None
    assert CompanyType.from_label(None) is None
    assert VoteType.from_label("") is None


def test_vote_type_has_four_states():
    assert len(VoteType) == 4


def test_eligible_participant_type():
    assert eligible_participant_type(MeetingType.BOD) is ParticipantType.MEMBER_OF_BOARD
    assert eligible_participant_type(MeetingType.FMP) is ParticipantType.OWNER
    assert eligible_participant_type(MeetingType.FMS) is ParticipantType.OWNER
