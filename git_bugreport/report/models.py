"""Report data types."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Section:
    """One titled block of the report."""

    title: str
    body: str

    def render(self) -> str:
        return f"\n\n[{self.title}]\n{self.body}"


@dataclass(frozen=True)
class Report:
    """Guidance template followed by the collected sections, in order."""

    template: str
    sections: Tuple[Section, ...] = ()

    @property
    def titles(self) -> Tuple[str, ...]:
        return tuple(section.title for section in self.sections)

    def render(self) -> str:
        """Flatten the report into the text written to disk."""
        return self.template + "".join(section.render() for section in self.sections)
