# ghopac Console Output
# Rich-based, line-oriented status log

from typing import TYPE_CHECKING, Optional, TextIO

from rich.console import Console as RichConsole
from rich.text import Text

from ghopac.sync.target import SyncTarget

if TYPE_CHECKING:
    from ghopac.sync.engine import SyncResult


class Console:
    """
    Status log for sync runs.

    Every event is one line starting with a severity marker. Rich
    serializes print calls, so workers may log concurrently.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True, file: Optional[TextIO] = None):
        """
        Initialize console.

        Args:
            verbose: Also log successful operations and progress.
            colored: Enable colored output.
            file: Optional stream. Defaults to stderr.
        """
        self.verbose = verbose
        self._console = RichConsole(
            file=file,
            stderr=file is None,
            no_color=not colored,
            highlight=False,
            soft_wrap=True,
        )

    def _line(self, marker: str, style: str, message: str) -> None:
        text = Text()
        text.append(f"[{marker}]", style=style)
        text.append("\t")
        text.append(message)
        self._console.print(text)

    def info(self, message: str) -> None:
        """Progress message, shown only in verbose mode."""
        if self.verbose:
            self._line("INFO", "blue", message)

    def ok(self, target: SyncTarget, detail: str = "") -> None:
        """Successful sync, shown only in verbose mode."""
        if self.verbose:
            self._line("OK", "green", f"{target.label} ({detail})" if detail else target.label)

    def warning(self, message: str) -> None:
        """Producer or target warning, always shown."""
        self._line("WARNING", "yellow", message)

    def failed(self, target: SyncTarget, error: str) -> None:
        """Failed sync, always shown."""
        self._line("FAILED", "red", f"{target.label} -> {error}")

    def print_summary(self, result: "SyncResult") -> None:
        """Print the one-line run summary."""
        if result.success:
            self._line("DONE", "green", f"{result.targets_queued} targets synced with {result.workers} workers")
        else:
            self._line(
                "DONE",
                "red",
                f"{result.targets_queued} targets queued with {result.workers} workers, "
                f"{result.producer_warnings} source warnings, {result.failed_workers} workers reported failures",
            )


def create_console(*, verbose: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored)
