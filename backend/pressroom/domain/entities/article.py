"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

SHORT_DESCRIPTION_LENGTH = 200
TITLE_REQUIRED_MESSAGE = '"Title" is required'


@dataclass(frozen=True)
class ValidationMessage:
    """A single field-level validation failure."""

    field: str
    message: str


@dataclass
class Article:
    """Core domain entity representing a short text article."""

    title: str
    author: str | None = None
    body: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def update(self, title: str, author: str | None, body: str | None) -> None:
        """Replace the editable fields and refresh the updated_at timestamp."""
        self.title = title
        self.author = author
        self.body = body
        self.updated_at = datetime.now(timezone.utc)

    def validation_errors(self) -> list[ValidationMessage]:
        """Return every constraint the current field values violate."""
        errors: list[ValidationMessage] = []
        if not (self.title or "").strip():
            errors.append(ValidationMessage(field="title", message=TITLE_REQUIRED_MESSAGE))
        return errors

    def published_at(self) -> str:
        """Format created_at as e.g. ``March 4, 2024, 3:45pm``."""
        ts = self.created_at
        hour = ts.hour % 12 or 12
        meridiem = "am" if ts.hour < 12 else "pm"
        return f"{ts:%B} {ts.day}, {ts.year}, {hour}:{ts:%M}{meridiem}"

    def short_description(self) -> str:
        """First 200 characters of the body, with an ellipsis when cut."""
        body = self.body or ""
        if len(body) > SHORT_DESCRIPTION_LENGTH:
            return body[:SHORT_DESCRIPTION_LENGTH] + "..."
        return body
