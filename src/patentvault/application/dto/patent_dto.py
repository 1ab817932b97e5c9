"""Patent DTOs."""

from dataclasses import dataclass
from datetime import date


@dataclass
class PatentInput:
    """Fields accepted when importing or editing a patent."""

    name: str
    patentee: str
    country: str
    status: str
    app_number: str
    annuity_date: date | None = None
    notification_emails: str | None = None
