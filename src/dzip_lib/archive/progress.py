# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from types import TracebackType
from typing import Self

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskID,
    TaskProgressColumn,
    TextColumn,
)

from dzip_lib.core.config import CFG


class ProgressBar:
    """
    Terminal progress bar displaying the percentage of compressed files.

    Use as a context manager and pass `update` as the progress callback of an Archiver.
    """

    def __init__(self, console: Console | None = None):
        """
        Initialize the ProgressBar.

        Args:
            console (Console | None): Console to render to. Defaults to standard error.
        """
        settings = CFG.progress_bar
        self._progress = Progress(
            TextColumn(f"[{settings.text_style}]{settings.description}"),
            BarColumn(
                bar_width=settings.bar_width,
                complete_style=settings.complete_style,
                finished_style=settings.finished_style,
            ),
            TaskProgressColumn(),
            console=console or Console(stderr=True),
            transient=settings.transient,
        )
        self._task: TaskID | None = None
        self.percent = 0

    def __enter__(self) -> Self:
        self._progress.start()
        self._task = self._progress.add_task(CFG.progress_bar.description, total=100)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def update(self, percent: int) -> None:
        """
        Move the bar to the specified percentage.

        Args:
            percent (int): Percentage of processed files. Values above 100 are clamped.
        """
        self.percent = max(0, min(percent, 100))
        if self._task is not None:
            self._progress.update(self._task, completed=self.percent)
