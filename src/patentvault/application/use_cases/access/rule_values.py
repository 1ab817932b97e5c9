"""Access rule value normalization and mirroring."""

from patentvault.domain.exceptions import ValidationError
from patentvault.domain.services import IdentityNormalizer
from patentvault.domain.value_objects import RuleKind


def normalize_rule_value(normalizer: IdentityNormalizer, value: str, kind: RuleKind) -> str:
    """Canonical stored form of a rule value; raises ValidationError if malformed."""
    value = value.strip().lower()
    if kind == RuleKind.EMAIL:
        local, sep, domain = value.rpartition("@")
        if not sep or not local or not domain or "@" in local:
            raise ValidationError(f"Invalid email: {value!r}")
        return normalizer.normalize(value)

    value = value.removeprefix("@")
    if not value or "@" in value or "." not in value:
        raise ValidationError(f"Invalid domain: {value!r}")
    return normalizer.canonical_domain(value)


def mirrored_values(normalizer: IdentityNormalizer, value: str, kind: RuleKind) -> list[str]:
    """The value followed by its alias-domain twin, if any."""
    if kind == RuleKind.EMAIL:
        other = normalizer.mirror(value)
    else:
        other = normalizer.mirror_domain(value)
    return [value, other] if other else [value]
