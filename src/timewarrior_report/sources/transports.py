from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, TextIO, Union

from timewarrior_report.errors import ReportIOError


class Transport(ABC):
    """Source of the raw report payload, read to end-of-stream in one go."""

    @abstractmethod
    def chunks(self) -> Iterator[bytes]:
        pass

    def read(self) -> bytes:
        return b"".join(self.chunks())


def _iter_file(f: Union[BinaryIO, TextIO], chunk_size: int, label: str) -> Iterator[bytes]:
    try:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield chunk.encode("utf-8") if isinstance(chunk, str) else chunk
    except OSError as exc:
        raise ReportIOError(f"failed to read {label}: {exc}") from exc


class FsFileTransport(Transport):
    def __init__(self, path: Union[str, Path], *, chunk_size: int = 65536):
        self.path = Path(path)
        self.chunk_size = chunk_size

    def chunks(self) -> Iterator[bytes]:
        try:
            f = self.path.open("rb")
        except OSError as exc:
            raise ReportIOError(f"failed to open {self.path}: {exc}") from exc
        with f:
            yield from _iter_file(f, self.chunk_size, str(self.path))


class StreamTransport(Transport):
    """Reads an already-open binary or text file object; the caller closes it."""

    def __init__(self, stream: Union[BinaryIO, TextIO], *, chunk_size: int = 65536):
        self.stream = stream
        self.chunk_size = chunk_size

    def chunks(self) -> Iterator[bytes]:
        label = getattr(self.stream, "name", None) or "stream"
        yield from _iter_file(self.stream, self.chunk_size, str(label))


class StdinTransport(StreamTransport):
    def __init__(self, stdin: Optional[TextIO] = None, *, chunk_size: int = 65536):
        stdin = stdin if stdin is not None else sys.stdin
        if stdin is None:
            raise ReportIOError("standard input is not available")
        # Prefer the underlying bytes so decoding stays under our control.
        super().__init__(getattr(stdin, "buffer", stdin), chunk_size=chunk_size)
