"""Error Hierarchy - typed, categorized exceptions for every approval failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Missing records and unknown enum labels map to 404
    - Duplicate records map to 400
    - Infrastructure errors (database) map to 503
    - to_response() produces the REST envelope, no internal details leaked

Design Decisions:
    - Single hierarchy with ApprovalError base: one FastAPI handler catches all
    - ErrorContext carries the resource coordinates for logging and clients
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Resource coordinates attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: Any = None
    debug_info: dict[str, Any] | None = None


class ApprovalError(Exception):
    """Base exception for all approval errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource_type": self.context.resource_type,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Not Found (404) ────────────────────────────────────────────

class ResourceNotFoundError(ApprovalError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: Any, message: str | None = None):
        super().__init__(
            message or f"{resource_type} with ID {resource_id} not found.",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR,
            ErrorContext(resource_type=resource_type, resource_id=resource_id),
            404,
        )


class CompanyNotFound(ResourceNotFoundError):
    def __init__(self, company_id: int):
        super().__init__("Company", company_id)


class ParticipantNotFound(ResourceNotFoundError):
    def __init__(self, participant_id: int):
        super().__init__("Participant", participant_id)


class MeetingNotFound(ResourceNotFoundError):
    def __init__(self, meeting_id: int):
        super().__init__("Meeting", meeting_id)


class MeetingParticipantNotFound(ResourceNotFoundError):
    def __init__(self, participant_id: int):
        super().__init__(
            "MeetingParticipant", participant_id,
            f"Meeting participant with ID '{participant_id}' not found.",
        )


class TopicNotFound(ResourceNotFoundError):
    def __init__(self, topic_id: int):
        super().__init__("Topic", topic_id)


class VotingNotFound(ResourceNotFoundError):
    def __init__(self, topic_id: int):
        super().__init__(
            "Voting", topic_id, f"Voting for topic with ID {topic_id} not found.",
        )


class VoterNotFound(ResourceNotFoundError):
    def __init__(self, voter_id: int):
        super().__init__("Voter", voter_id)


class EnumLabelNotFound(ApprovalError):
    """An enum label (company type, meeting type, ...) matched no member."""
    def __init__(self, kind: str, label: str | None):
        super().__init__(
            f"{kind} '{label}' not found.",
            "TYPE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR,
            ErrorContext(resource_type=kind, resource_id=label),
            404,
        )


class CompanyTypeNotFound(EnumLabelNotFound):
    def __init__(self, label: str | None):
        super().__init__("Company type", label)


class MeetingTypeNotFound(EnumLabelNotFound):
    def __init__(self, label: str | None):
        super().__init__("Meeting type", label)


class ParticipantTypeNotFound(EnumLabelNotFound):
    def __init__(self, label: str | None):
        super().__init__("Participant type", label)


class VoteTypeNotFound(EnumLabelNotFound):
    def __init__(self, label: str | None):
        super().__init__("Vote type", label)


class OwnershipError(ApprovalError):
    """A child resource exists but is not scoped under the requested parent."""
    def __init__(self, message: str, resource_type: str, resource_id: int):
        super().__init__(
            message, "OWNERSHIP_MISMATCH", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR,
            ErrorContext(resource_type=resource_type, resource_id=resource_id),
            404,
        )


class MeetingDoesNotBelongToCompany(OwnershipError):
    def __init__(self, company_id: int, meeting_id: int):
        super().__init__(
            f"Meeting with ID {meeting_id} does not belong to Company with ID {company_id}",
            "Meeting", meeting_id,
        )


class ParticipantDoesNotBelongToCompany(OwnershipError):
    def __init__(self, company_id: int, participant_id: int):
        super().__init__(
            f"Participant with ID {participant_id} does not belong to Company with ID {company_id}",
            "Participant", participant_id,
        )


class TopicDoesNotBelongToMeeting(OwnershipError):
    def __init__(self, meeting_id: int, topic_id: int):
        super().__init__(
            f"Topic with ID {topic_id} does not belong to Meeting with ID {meeting_id}",
            "Topic", topic_id,
        )


# ─── Duplicates (400) ───────────────────────────────────────────

class AlreadyExistsError(ApprovalError):
    """Creating the record would duplicate an existing one."""
    def __init__(self, message: str, resource_type: str, resource_id: Any = None):
        super().__init__(
            message, "ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR,
            ErrorContext(resource_type=resource_type, resource_id=resource_id),
            400,
        )


class CompanyAlreadyExists(AlreadyExistsError):
    def __init__(self, title: str | None, inn: int):
        super().__init__(
            f"Company {title} with INN {inn} already exists.", "Company", inn,
        )


class MeetingAlreadyExists(AlreadyExistsError):
    def __init__(self, company_id: int, meeting_type: str, date: Any):
        super().__init__(
            f"Company with ID {company_id} already has a {meeting_type} meeting on {date}.",
            "Meeting", None,
        )


class ParticipantAlreadyExists(AlreadyExistsError):
    def __init__(self, name: str):
        super().__init__(
            f"Participant with name '{name}' already exists.", "Participant", name,
        )


class MeetingParticipantAlreadyExists(AlreadyExistsError):
    def __init__(self, participant_id: int):
        super().__init__(
            f"MeetingParticipant with id '{participant_id}' already exists.",
            "MeetingParticipant", participant_id,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ApprovalError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
