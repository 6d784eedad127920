from __future__ import annotations

import enum
import logging
import queue
import threading
from typing import BinaryIO, Iterable, Iterator, TextIO

from .errors import DictionaryError, MalformedLineError, StreamReadError
from .grammar import DEFAULT_GRAMMAR, LineGrammar
from .models import ParseStats, Token

LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_LINE_LENGTH = 64 * 1024

# Polling interval used so a blocked producer notices cancellation.
_PUT_POLL_SECONDS = 0.05

_END_OF_STREAM = object()


def iter_entries(
    lines: Iterable[str] | Iterable[bytes],
    *,
    grammar: LineGrammar | None = None,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
    encoding: str = "utf-8",
    stats: ParseStats | None = None,
) -> Iterator[Token]:
    """
    Lazily parse dictionary lines into tokens, in source order.

    Parameters
    ----------
    lines:
        Any iterable of lines, typically a file opened in binary mode. Byte
        lines are decoded one at a time, so a decoding failure is reported on
        the line that caused it.
    grammar:
        Grammar applied to every line. Defaults to the standard dictionary grammar.
    max_line_length:
        Longest accepted line in encoded bytes, line ending excluded; 0
        disables the check.
    encoding:
        Codec used to decode byte lines and to measure text lines.
    stats:
        Optional counters updated as lines are consumed.

    Raises
    ------
    MalformedLineError
        On the first line whose frequency field cannot be converted.
    StreamReadError
        When fetching or decoding the next line fails, or a line exceeds
        ``max_line_length``.
    """
    grammar = grammar or DEFAULT_GRAMMAR
    stats = stats if stats is not None else ParseStats()
    source = iter(lines)
    line_number = 0
    while True:
        line_number += 1
        try:
            raw = next(source)
        except StopIteration:
            return
        except (OSError, ValueError) as exc:
            raise StreamReadError(exc, line_number=line_number) from exc
        stats.lines_read += 1
        if max_line_length and _encoded_length(raw, encoding) > max_line_length:
            raise StreamReadError(
                ValueError(f"line longer than {max_line_length} bytes"),
                line_number=line_number,
            )
        if isinstance(raw, bytes):
            try:
                line = raw.decode(encoding)
            except UnicodeDecodeError as exc:
                raise StreamReadError(exc, line_number=line_number) from exc
        else:
            line = raw
        try:
            token = grammar.parse(line)
        except MalformedLineError as exc:
            exc.line_number = line_number
            raise
        if token is None:
            stats.skipped += 1
            continue
        stats.tokens += 1
        yield token


def _encoded_length(raw: str | bytes, encoding: str) -> int:
    if isinstance(raw, bytes):
        return len(raw.rstrip(b"\r\n"))
    return len(raw.rstrip("\r\n").encode(encoding, errors="replace"))


class ParserState(enum.Enum):
    IDLE = "idle"
    READING = "reading"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class ErrorSlot:
    """Single-assignment cell holding the terminal error of a parse run."""

    def __init__(self) -> None:
        self._resolved = threading.Event()
        self._lock = threading.Lock()
        self._error: DictionaryError | None = None

    def set(self, error: DictionaryError) -> None:
        with self._lock:
            if self._resolved.is_set():
                raise RuntimeError("Error slot already resolved.")
            self._error = error
            self._resolved.set()

    def close(self) -> None:
        """Resolve the slot without an error if nothing was recorded."""
        with self._lock:
            self._resolved.set()

    @property
    def resolved(self) -> bool:
        return self._resolved.is_set()

    def get(self, timeout: float | None = None) -> DictionaryError | None:
        if not self._resolved.wait(timeout):
            raise TimeoutError("Parser did not finish within the timeout.")
        return self._error


class TokenStream(Iterator[Token]):
    """Consumer side of the token channel; iteration ends when the parser closes it."""

    def __init__(self, channel: queue.Queue[object]) -> None:
        self._channel = channel
        self._exhausted = False
        self.delivered = 0

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> TokenStream:
        return self

    def __next__(self) -> Token:
        if self._exhausted:
            raise StopIteration
        item = self._channel.get()
        if item is _END_OF_STREAM:
            self._exhausted = True
            raise StopIteration
        self.delivered += 1
        return item  # type: ignore[return-value]


class StreamingParser:
    """
    Parse a line stream on a background thread.

    Tokens flow through a bounded queue (``buffer_size`` slots, 0 for
    unbounded) to the TokenStream returned by ``tokens()``. The terminal
    error, if any, lands in an ErrorSlot that ``wait()`` blocks on. The error
    is recorded before the token stream is closed.
    """

    def __init__(
        self,
        handle: Iterable[str] | Iterable[bytes] | TextIO | BinaryIO,
        *,
        grammar: LineGrammar | None = None,
        buffer_size: int = 1,
        max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
        encoding: str = "utf-8",
        name: str | None = None,
    ) -> None:
        if buffer_size < 0:
            raise ValueError("buffer_size must be >= 0.")
        self._handle = handle
        self._grammar = grammar or DEFAULT_GRAMMAR
        self._max_line_length = max_line_length
        self._encoding = encoding
        self._channel: queue.Queue[object] = queue.Queue(maxsize=buffer_size)
        self._stream = TokenStream(self._channel)
        self._error = ErrorSlot()
        self._cancelled = threading.Event()
        self._name = name or getattr(handle, "name", "<stream>")
        self._thread = threading.Thread(
            target=self._run, name=f"freqdict-parser:{self._name}", daemon=True
        )
        self.stats = ParseStats()
        self.state = ParserState.IDLE

    def start(self) -> StreamingParser:
        if self.state is not ParserState.IDLE:
            raise RuntimeError("StreamingParser can only be started once.")
        self.state = ParserState.READING
        self._thread.start()
        return self

    def tokens(self) -> TokenStream:
        return self._stream

    def cancel(self) -> None:
        """Ask the producer to stop; used when the consumer abandons the stream."""
        self._cancelled.set()

    def wait(self, timeout: float | None = None) -> DictionaryError | None:
        """Block until the run finishes and return its terminal error, if any."""
        error = self._error.get(timeout)
        self._thread.join(timeout)
        return error

    def _run(self) -> None:
        LOGGER.debug("Parsing dictionary stream %s", self._name)
        try:
            for token in iter_entries(
                self._handle,
                grammar=self._grammar,
                max_line_length=self._max_line_length,
                encoding=self._encoding,
                stats=self.stats,
            ):
                if not self._put(token):
                    self.state = ParserState.CANCELLED
                    return
        except (MalformedLineError, StreamReadError) as exc:
            LOGGER.warning("Stopped parsing %s: %s", self._name, exc)
            self._error.set(exc)
            self.state = ParserState.FAILED
        except Exception as exc:
            LOGGER.exception("Unexpected failure while parsing %s", self._name)
            self._error.set(
                StreamReadError(exc, line_number=self.stats.lines_read + 1)
            )
            self.state = ParserState.FAILED
        else:
            self.state = ParserState.COMPLETED
            LOGGER.debug(
                "Finished parsing %s: %d tokens, %d lines skipped",
                self._name,
                self.stats.tokens,
                self.stats.skipped,
            )
        finally:
            self._put(_END_OF_STREAM)
            self._error.close()

    def _put(self, item: object) -> bool:
        while not self._cancelled.is_set():
            try:
                self._channel.put(item, timeout=_PUT_POLL_SECONDS)
            except queue.Full:
                continue
            return True
        return False
