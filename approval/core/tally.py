"""Vote Tally - counts ballots per vote type and decides accept/reject.

Invariants:
    - Single pass over the ballots, no IO
    - counts always has one entry per VoteType (zero when unused)
    - Board of directors: one head, one vote; accepted iff YES > half of all ballots
    - General meetings: YES weighted by share; accepted iff YES shares > 50.0 (percent)
    - No ballots means not accepted
"""

from dataclasses import dataclass, field
from typing import Iterable

from approval.core.domain_types import MeetingType, VoteType

SHARE_MAJORITY = 50.0
HEAD_MAJORITY = 0.5


@dataclass(frozen=True)
class Ballot:
    """One voter's current vote and the share it carries."""
    vote: VoteType
    share: float = 0.0


@dataclass
class VoteTally:
    counts: dict[VoteType, int] = field(
        default_factory=lambda: {v: 0 for v in VoteType},
    )
    approval: float = 0.0
    total: int = 0
    weighted: bool = False
    accepted: bool = False


def is_weighted(meeting_type: MeetingType) -> bool:
    """Shares decide general meetings; board meetings count heads."""
    return meeting_type != MeetingType.BOD


def tally_votes(ballots: Iterable[Ballot], weighted: bool) -> VoteTally:
    """Count ballots and decide the outcome."""
    tally = VoteTally(weighted=weighted)
    for ballot in ballots:
        tally.total += 1
        tally.counts[ballot.vote] += 1
        if ballot.vote == VoteType.YES:
            tally.approval += (ballot.share or 0.0) if weighted else 1.0

    if weighted:
        tally.accepted = tally.approval > SHARE_MAJORITY
    else:
        tally.accepted = tally.approval > tally.total * HEAD_MAJORITY
    return tally
