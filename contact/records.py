from dataclasses import dataclass
from datetime import datetime, timezone

# Form field names as posted by the contact form.
FORM_FIELDS = ("fullname", "email", "message")


def make_timestamp(now=None):
    """ISO-8601 UTC instant with millisecond precision, e.g. 2026-10-19T08:15:30.123Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


@dataclass(frozen=True)
class SubmissionRecord:
    full_name: str
    email: str
    message: str
    timestamp: str

    @classmethod
    def from_form(cls, data, now=None):
        """
        Build a record from submitted form data.

        Values are copied verbatim; a missing field becomes an empty string.
        """
        full_name, email, message = (data.get(field, "") for field in FORM_FIELDS)
        return cls(
            full_name=full_name,
            email=email,
            message=message,
            timestamp=make_timestamp(now),
        )
