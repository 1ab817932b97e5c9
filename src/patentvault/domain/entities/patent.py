"""Patent record - the data guarded by permission keys."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass
class Patent:
    """Patent record as held by the record store."""

    id: UUID
    name: str
    patentee: str
    country: str
    status: str
    app_number: str
    created_at: datetime
    updated_at: datetime
    annuity_date: date | None = None
    notification_emails: str | None = None

    @property
    def recipients(self) -> list[str]:
        """Notification addresses from the comma separated field."""
        if not self.notification_emails:
            return []
        return [e.strip() for e in self.notification_emails.split(",") if e.strip()]
