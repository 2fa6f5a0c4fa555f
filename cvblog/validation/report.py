"""Console reporting for IA validation."""

from rich.console import Console
from rich.text import Text

from ..models import Issue, Severity, ValidationReport

console = Console()

PREFIX = "[validate-blog-ia]"


def format_issue(issue: Issue) -> Text:
    """'[ERROR] file :: message' or '[WARN] file :: message'."""
    if issue.severity == Severity.ERROR:
        tag = Text("[ERROR]", style="bold red")
    else:
        tag = Text("[WARN]", style="yellow")
    return Text.assemble(tag, f" {issue.file} :: {issue.message}")


def print_report(report: ValidationReport) -> None:
    """Print one line per issue followed by a summary line."""
    if not report.issues:
        console.print(
            Text(f"{PREFIX} All validated posts satisfy IA checks.", style="green"),
            soft_wrap=True,
        )
        return

    for issue in report.issues:
        console.print(format_issue(issue), soft_wrap=True)

    console.print()
    console.print(
        Text(
            f"{PREFIX} Summary: {len(report.errors)} error(s), {len(report.warnings)} warning(s).",
            style="bold",
        ),
        soft_wrap=True,
    )
