"""Models for IA validation results."""

from enum import Enum
from typing import List, Literal

from pydantic import BaseModel, Field

from .base import RecordModel


class Severity(str, Enum):
    """Issue severity. Only errors block publishing."""

    ERROR = "error"
    WARNING = "warning"


IssueCode = Literal[
    "missing-section",
    "section-out-of-order",
    "missing-key-takeaways",
    "missing-checklist",
    "steps-missing-subheadings",
    "invalid-layout-preset",
]


class Heading(RecordModel):
    """H2 or H3 heading extracted from an article body."""

    depth: Literal[2, 3] = Field(..., description="Heading level")
    text: str = Field(..., description="Heading text as written")


class Issue(RecordModel):
    """Single validation finding."""

    file: str = Field(..., description="File or article identifier")
    severity: Severity = Field(..., description="error or warning")
    code: IssueCode = Field(..., description="Machine-readable issue code")
    message: str = Field(..., description="Human-readable explanation")

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR


class ValidationReport(BaseModel):
    """Aggregated result of validating a whole corpus."""

    issues: List[Issue] = Field(default_factory=list, description="Every issue, in article order")
    files_checked: int = Field(0, description="Articles that passed the applicability gate")
    files_skipped: int = Field(0, description="Articles outside IA validation scope")

    @property
    def errors(self) -> List[Issue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[Issue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        return any(i.is_error for i in self.issues)

    @property
    def passed(self) -> bool:
        """True when nothing blocks publishing. Warnings never block."""
        return not self.has_errors
