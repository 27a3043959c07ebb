import time
from contextlib import contextmanager
from dataclasses import dataclass, field

LABEL_WIDTH = 70


@dataclass
class Timings:
    """Labelled durations, in the order they were recorded."""

    entries: list[tuple[str, float]] = field(default_factory=list)

    def record(self, description: str, start_s: float):
        self.entries.append((description, time.perf_counter() - start_s))

    @contextmanager
    def time(self, description: str):
        start_s = time.perf_counter()
        yield
        self.record(description, start_s)

    def format(self) -> list[str]:
        return [
            description.rjust(LABEL_WIDTH) + f"  {elapsed_s:0.5f}s"
            for description, elapsed_s in self.entries
        ]
