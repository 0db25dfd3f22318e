"""Append-only audit trail kept in an order's free-text memo."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuditTrail:
    """Newline-joined memo entries.

    The memo column stays a plain string; this value is the only place that
    knows how entries are separated.
    """

    entries: tuple[str, ...] = ()

    @classmethod
    def parse(cls, memo: str | None) -> "AuditTrail":
        if not memo:
            return cls()
        return cls(tuple(memo.split("\n")))

    def append(self, entry: str) -> "AuditTrail":
        return AuditTrail((*self.entries, entry))

    def render(self) -> str | None:
        return "\n".join(self.entries) or None
