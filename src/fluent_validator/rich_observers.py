"""Rich-based observers for validation progress display.

Provides Rich console UI components for following a FluentValidator run
and printing its errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fluent_validator.events import (
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)

if TYPE_CHECKING:
    from rich.console import Console
    from rich.progress import Progress, TaskID
    from rich.table import Table

__all__ = ["RichSummaryObserver", "SimpleProgressObserver"]


class SimpleProgressObserver(ValidationObserver):
    """Progress bar over the elements of a run with pass/fail counts.

    Must be used within a Rich Progress context.

    Example:
        from rich.progress import Progress

        with Progress() as progress:
            engine.add_observer(SimpleProgressObserver(progress))
            engine.do_validate()
    """

    def __init__(
        self,
        progress: Progress,
        task_description: str = "Validating",
    ) -> None:
        """Initialize the progress observer.

        Args:
            progress: A Rich Progress instance (must be started).
            task_description: Description text shown in the progress bar.
        """
        self._progress = progress
        self._task_id: TaskID | None = None
        self._description = task_description
        self._passed = 0
        self._failed = 0

    @property
    def passed(self) -> int:
        """Elements that passed in the current run."""
        return self._passed

    @property
    def failed(self) -> int:
        """Elements that failed or raised in the current run."""
        return self._failed

    def on_event(self, event: ValidationEvent) -> None:
        """Handle validation events to update the progress bar.

        Args:
            event: The validation event to handle.
        """
        if event.event_type == ValidationEventType.VALIDATION_STARTED:
            self._passed = 0
            self._failed = 0
            self._task_id = self._progress.add_task(
                self._description,
                total=event.data.get("element_count") or None,
            )

        elif event.event_type == ValidationEventType.ELEMENT_VALIDATED:
            if event.data.get("passed") and not event.data.get("raised"):
                self._passed += 1
            else:
                self._failed += 1

            if self._task_id is not None:
                self._progress.update(
                    self._task_id,
                    advance=1,
                    description=(
                        f"{self._description} [green]✓{self._passed}[/] [red]✗{self._failed}[/]"
                    ),
                )

        elif event.event_type in (
            ValidationEventType.VALIDATION_COMPLETED,
            ValidationEventType.VALIDATION_ABORTED,
        ):
            if self._task_id is not None:
                total = self._passed + self._failed
                if total > 0:
                    self._progress.update(self._task_id, completed=total)


class RichSummaryObserver(ValidationObserver):
    """Print a table of recorded errors when a run ends.

    Example:
        observer = RichSummaryObserver()
        engine.add_observer(observer)
        engine.do_validate()
        # ┏━━━━━━━┳━━━━━━┳━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
        # ┃ Field ┃ Line ┃ Message                         ┃
        # ...
    """

    def __init__(
        self,
        console: Console | None = None,
        max_rows: int = 50,
    ) -> None:
        """Initialize the summary observer.

        Args:
            console: Rich Console instance. If None, creates a new one.
            max_rows: Maximum number of errors listed in the table.
        """
        from rich.console import Console

        self._console = console or Console()
        self._max_rows = max_rows
        self._errors: list[tuple[str, int, str]] = []

    @property
    def errors(self) -> list[tuple[str, int, str]]:
        """(field, line, message) tuples collected during the current run."""
        return self._errors.copy()

    def on_event(self, event: ValidationEvent) -> None:
        """Collect errors and print the summary at the end of a run.

        Args:
            event: The validation event to handle.
        """
        if event.event_type == ValidationEventType.VALIDATION_STARTED:
            self._errors = []

        elif event.event_type == ValidationEventType.ERROR_ADDED:
            self._errors.append(
                (
                    str(event.data.get("field_name") or "-"),
                    int(event.data.get("line_number") or 0),
                    str(event.data.get("message", "")),
                )
            )

        elif event.event_type == ValidationEventType.VALIDATION_COMPLETED:
            self._console.print(self._build_errors_table())
            self._console.print(
                f"[bold]Validated:[/] {event.data.get('validated', 0)}  "
                f"[red]Errors:[/] {event.data.get('error_count', 0)}  "
                f"[cyan]Duration:[/] {event.data.get('duration_ms', 0.0):.2f}ms"
            )

        elif event.event_type == ValidationEventType.VALIDATION_ABORTED:
            self._console.print(self._build_errors_table())
            self._console.print(f"[bold red]Validation aborted:[/] {event.data.get('exception')}")

    def _build_errors_table(self) -> Table:
        from rich.table import Table

        table = Table(
            title="Validation Errors",
            show_header=True,
            header_style="bold magenta",
        )
        table.add_column("Field", style="cyan")
        table.add_column("Line", justify="right")
        table.add_column("Message", style="yellow")

        for field_name, line, msg in self._errors[: self._max_rows]:
            table.add_row(field_name, str(line), msg)

        if not self._errors:
            table.add_row("-", "-", "No errors")
        elif len(self._errors) > self._max_rows:
            table.add_row("...", "", f"{len(self._errors) - self._max_rows} more")

        return table
