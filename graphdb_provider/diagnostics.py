"""Non-fatal diagnostics reported back to the host."""

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Diagnostic:
    """A single message for the host to present to the user."""

    severity: str  # "error" or "warning"
    summary: str
    detail: str
    attribute: str | None = None


@dataclass
class Diagnostics:
    """Ordered collection of diagnostics produced by one operation."""

    items: list[Diagnostic] = field(default_factory=list)

    def add_error(self, summary: str, detail: str, attribute: str | None = None) -> None:
        self.items.append(Diagnostic("error", summary, detail, attribute))

    def add_warning(self, summary: str, detail: str, attribute: str | None = None) -> None:
        self.items.append(Diagnostic("warning", summary, detail, attribute))

    def extend(self, other: "Diagnostics") -> None:
        self.items.extend(other.items)

    def errors(self) -> list[Diagnostic]:
        return [d for d in self.items if d.severity == "error"]

    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.items if d.severity == "warning"]

    def has_error(self) -> bool:
        return any(d.severity == "error" for d in self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
