"""Address and opening-hours value objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    street: str
    city: str
    postal_code: str
    street2: str | None = None
    street3: str | None = None

    def formatted(self) -> str:
        """Street lines joined by single spaces; blank extra lines are skipped."""
        parts = [self.street]
        parts.extend(p for p in (self.street2, self.street3) if p and p.strip())
        return " ".join(parts).strip()


@dataclass(frozen=True)
class OpeningHours:
    open: str
    close: str
