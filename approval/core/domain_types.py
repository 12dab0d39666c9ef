"""Domain Types - governance enumerations shared by models, schemas and services.

Invariants:
    - Every enum member carries a code (its value) and a Russian display label
    - All valid states encoded as Enums, no raw string matching in services
    - from_label() accepts either the code (case-insensitive) or the exact label

Design Decisions:
    - str Enums: serialize to JSON and store in String columns without custom encoders
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class LabeledEnum(str, Enum):
    """str Enum whose members also carry a human-readable label."""

    def __new__(cls, code: str, label: str):
        member = str.__new__(cls, code)
        member._value_ = code
        member.label = label
        return member

    @classmethod
    def from_label(cls, label: str | None):
        """Resolve a member by code or display label. Returns None when unknown."""
        if label is None:
            return None
        text = str(label).strip()
        for member in cls:
            if member.value == text.upper() or member.label == text:
                return member
        return None


class CompanyType(LabeledEnum):
    """Legal form of a company."""
    JSC = ("JSC", "Акционерное общество")
    LLC = ("LLC", "Общество с ограниченной ответственностью")


class MeetingType(LabeledEnum):
    """Governance body holding the meeting."""
    BOD = ("BOD", "Совет директоров")
    FMP = ("FMP", "Общее собрание участников")
    FMS = ("FMS", "Общее собрание акционеров")


class ParticipantType(LabeledEnum):
    """Role of a participant inside the company."""
    OWNER = ("OWNER", "Собственник")
    MEMBER_OF_BOARD = ("MEMBER_OF_BOARD", "Член совета директоров")


class VoteType(LabeledEnum):
    """Ballot options. NOT_VOTED is the initial state of every voter record."""
    NOT_VOTED = ("NOT_VOTED", "НЕ ГОЛОСОВАЛ")
    YES = ("YES", "ЗА")
    NO = ("NO", "ПРОТИВ")
    ABSTAINED = ("ABSTAINED", "ВОЗДЕРЖАЛСЯ")


def eligible_participant_type(meeting_type: MeetingType) -> ParticipantType:
    """Board meetings seat board members; general meetings seat owners."""
    if meeting_type == MeetingType.BOD:
        return ParticipantType.MEMBER_OF_BOARD
    return ParticipantType.OWNER
