"""Rule precedence - exact email beats domain, oldest rule wins a tie."""

from collections.abc import Sequence

from patentvault.domain.entities import AccessRule


def first_match(rules: Sequence[AccessRule]) -> AccessRule | None:
    """Earliest-created rule among rules at one precedence level."""
    if not rules:
        return None
    return min(rules, key=lambda r: (r.created_at, r.role))


def effective_role(
    email_rules: Sequence[AccessRule],
    domain_rules: Sequence[AccessRule],
    default: str,
) -> str:
    """Role granted by the highest-precedence matching rule."""
    for level in (email_rules, domain_rules):
        rule = first_match(level)
        if rule is not None:
            return rule.role
    return default
