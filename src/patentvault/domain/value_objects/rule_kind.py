"""Access rule kinds."""

from enum import StrEnum


class RuleKind(StrEnum):
    """What an access rule value matches against."""

    EMAIL = "EMAIL"
    DOMAIN = "DOMAIN"
