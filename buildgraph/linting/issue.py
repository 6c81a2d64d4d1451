from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List


class Severity(Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class LintingIssue:
    reason: str
    severity: Severity

    @staticmethod
    def error(reason: str) -> "LintingIssue":
        return LintingIssue(reason, Severity.ERROR)

    @staticmethod
    def warning(reason: str) -> "LintingIssue":
        return LintingIssue(reason, Severity.WARNING)

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.reason}"


class LintingError(RuntimeError):
    def __init__(self, issues: List[LintingIssue]):
        self.issues = issues
        super().__init__(
            "\n".join(["The graph has validation errors:"] + [f"  - {i.reason}" for i in issues])
        )


def errors(issues: Iterable[LintingIssue]) -> List[LintingIssue]:
    return [issue for issue in issues if issue.severity == Severity.ERROR]


def raise_if_errors(issues: Iterable[LintingIssue]) -> None:
    if found := errors(issues):
        raise LintingError(found)
