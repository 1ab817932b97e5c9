"""Domain services."""

from patentvault.domain.services.identity_normalizer import IdentityNormalizer
from patentvault.domain.services.rule_precedence import effective_role, first_match

__all__ = ["IdentityNormalizer", "effective_role", "first_match"]
