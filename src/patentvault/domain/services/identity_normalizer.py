"""Identity normalizer - canonical email form across aliased domains."""

from collections.abc import Mapping


class IdentityNormalizer:
    """Canonicalizes emails and mirrors them across alias domain pairs.

    ``aliases`` maps an alias domain to its canonical domain, e.g.
    ``{"co-b.com": "co-a.com"}``. Pairs must be disjoint so that mirroring
    is an involution.
    """

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        self._to_canonical: dict[str, str] = {}
        self._to_alias: dict[str, str] = {}
        for alias, canonical in (aliases or {}).items():
            alias = alias.strip().lower()
            canonical = canonical.strip().lower()
            if alias == canonical:
                raise ValueError(f"Domain cannot alias itself: {alias}")
            if canonical in self._to_alias or alias in self._to_alias:
                raise ValueError(f"Domain already has an alias: {canonical}")
            if alias in self._to_canonical or canonical in self._to_canonical:
                raise ValueError(f"Domain already aliased: {alias}")
            self._to_canonical[alias] = canonical
            self._to_alias[canonical] = alias

    def normalize(self, raw_email: str) -> str:
        """Lowercase, trim and rewrite an alias domain to its canonical domain."""
        email = raw_email.strip().lower()
        local, sep, domain = email.rpartition("@")
        if not sep:
            return email
        return f"{local}@{self.canonical_domain(domain)}"

    def canonical_domain(self, domain: str) -> str:
        domain = domain.strip().lower()
        return self._to_canonical.get(domain, domain)

    def mirror(self, email: str) -> str | None:
        """Same mailbox on the paired domain, or None when no alias exists."""
        local, sep, domain = email.strip().lower().rpartition("@")
        if not sep:
            return None
        other = self.mirror_domain(domain)
        if other is None:
            return None
        return f"{local}@{other}"

    def mirror_domain(self, domain: str) -> str | None:
        domain = domain.strip().lower()
        if domain in self._to_alias:
            return self._to_alias[domain]
        return self._to_canonical.get(domain)

    @staticmethod
    def domain_of(email: str) -> str | None:
        _, sep, domain = email.strip().lower().rpartition("@")
        return domain if sep and domain else None
