"""Append-mode trace output for request/response dumps."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType


class TraceSink:
    """Text sink that flushes after every write.

    The sink owns the underlying file; call ``close()`` (or use it as a
    context manager) to release it.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._file = open(self.path, "a", encoding="utf-8")

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, text: str) -> int:
        written = self._file.write(text)
        self._file.flush()
        return written

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> TraceSink:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
