"""Progress reporting hooks shared by the pipeline stages."""

from collections.abc import Callable

ProgressCallback = Callable[[float, str], None]


class StageProgress:
    """Map a stage's own 0-100 percent progress onto a slice of the whole job.

    Stages report ``(percent, message)``; the job tracks a single fraction in
    [0, 1]. ``start`` and ``span`` are fractions of the job.
    """

    def __init__(
        self,
        start: float,
        span: float,
        callback: Callable[[float, str], None] | None = None,
        prefix: str = "",
    ):
        self.start = start
        self.span = span
        self.callback = callback
        self.prefix = prefix
        self.fraction = start

    def __call__(self, percent: float, message: str) -> None:
        percent = max(0.0, min(100.0, percent))
        self.fraction = self.start + self.span * percent / 100.0
        if self.callback:
            self.callback(self.fraction, f"{self.prefix}{message}")
