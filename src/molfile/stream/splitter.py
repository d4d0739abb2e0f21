"""Streaming SDF record splitter.

``RecordSplitter`` is the one state machine: it buffers incoming chunks,
cuts the buffer at every ``$$$$`` terminator line and hands back complete
records in source order, keeping any trailing partial record (or partial
terminator) for the next chunk.

The delivery styles are thin front ends over it:

- ``SDFSplitter``: push style, calls a handler for each record
- ``SDFTransform``: pull style, queues records for the consumer to read
- ``split_records`` / ``asplit_records``: generator front ends for sync and
  async chunk sources
- ``iter_mol_records``: split and parse in one pass

Example:
    >>> list(split_records(["foo\\n", "$$$$\\nbar\\n", "$$$$\\nbletch\\n$$$$"]))
    ['foo\\n', 'bar\\n', 'bletch\\n']
"""

import codecs
import re
from collections import deque
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator
from types import TracebackType

from molfile.lib.errors import SplitterStateError
from molfile.lib.logging_config import get_logger
from molfile.models.config import SplitterConfig
from molfile.models.record import MolRecord
from molfile.parser.assembler import parse_mol

logger = get_logger(__name__)

Chunk = str | bytes | bytearray | memoryview
RecordHandler = Callable[[str], object]

# terminator line, optional CR, mandatory LF
TERMINATOR_RE = re.compile(r"^\$\$\$\$\r?\n", re.MULTILINE)
# at end of input the LF may be missing
FINAL_TERMINATOR_RE = re.compile(r"^\$\$\$\$\r?(?:\n|\Z)", re.MULTILINE)
# longest terminator line, "$$$$\r\n"
_TERMINATOR_LINE_LENGTH = 6


class RecordSplitter:
    """Chunk-fed SDF record splitter.

    One instance owns one buffer and serves exactly one input stream.
    ``feed`` may be called any number of times, then ``finish`` once.

    The buffer is kept as a list of pieces and only joined when a terminator
    completes, so a record fed one byte at a time is still joined once.
    """

    def __init__(self, config: SplitterConfig | None = None) -> None:
        """Initialize an empty splitter.

        Args:
            config: Decoding and trailing-fragment settings; defaults apply
                when omitted.
        """
        self.config = config or SplitterConfig()
        self._parts: list[str] = []
        # last characters buffered, enough to see a terminator straddle chunks
        self._tail = ""
        self._finished = False
        self._decoder = codecs.getincrementaldecoder(self.config.encoding)(
            errors=self.config.decode_errors
        )
        self.records_emitted = 0

    @property
    def finished(self) -> bool:
        """True once ``finish`` has been called."""
        return self._finished

    @property
    def buffered(self) -> str:
        """Text held back waiting for a terminator."""
        return "".join(self._parts)

    def _decode(self, chunk: Chunk) -> str:
        if isinstance(chunk, str):
            # bytes held for an incomplete character come before this text
            held = self._decoder.decode(b"", final=True)
            self._decoder.reset()
            return held + chunk
        return self._decoder.decode(bytes(chunk))

    def _cut(self, pattern: re.Pattern[str], lookback: int | None = None) -> list[str]:
        """Remove every terminated record from the buffer and return them.

        Args:
            pattern: Terminator pattern to cut on
            lookback: Search only this many trailing characters; the whole
                buffer when omitted
        """
        buffer = "".join(self._parts)
        scan_from = 0 if lookback is None else max(0, len(buffer) - lookback)
        records: list[str] = []
        start = 0
        for match in pattern.finditer(buffer, scan_from):
            records.append(buffer[start : match.start()])
            start = match.end()
        remainder = buffer[start:]
        self._parts = [remainder] if remainder else []
        self._tail = remainder[-_TERMINATOR_LINE_LENGTH:]
        return records

    def _emitted(self, records: list[str]) -> list[str]:
        for record in records:
            self.records_emitted += 1
            logger.debug(
                "Emitting record %d (%d chars)", self.records_emitted, len(record)
            )
        return records

    def feed(self, chunk: Chunk) -> list[str]:
        """Absorb a chunk and return the records it completed.

        Args:
            chunk: Text, or bytes decoded with the configured encoding. A
                multi-byte character may be split across byte chunks. A
                ``str`` chunk first flushes bytes the decoder still holds.

        Returns:
            Complete records in source order, terminators removed

        Raises:
            SplitterStateError: If called after ``finish``
        """
        if self._finished:
            raise SplitterStateError("Cannot feed a splitter after finish()")

        text = self._decode(chunk)
        if not text:
            return []
        window = self._tail + text
        self._tail = window[-_TERMINATOR_LINE_LENGTH:]
        self._parts.append(text)
        # a terminator can only start in the new text or just before it
        window_from = max(0, len(window) - len(text) - (_TERMINATOR_LINE_LENGTH - 1))
        if not TERMINATOR_RE.search(window, window_from):
            return []
        return self._emitted(self._cut(TERMINATOR_RE, len(window) - window_from))

    def finish(self) -> list[str]:
        """Signal end of input and return the remaining records.

        A final ``$$$$`` line without a trailing newline still counts as a
        terminator. Whatever follows the last terminator is emitted as a
        record only if it reaches ``config.min_trailing_length`` characters,
        since some producers omit the terminator after the last record.

        Raises:
            SplitterStateError: If called more than once
        """
        if self._finished:
            raise SplitterStateError("finish() called more than once")
        self._finished = True

        if held := self._decoder.decode(b"", final=True):
            self._parts.append(held)
        records = self._cut(FINAL_TERMINATOR_RE)

        remainder = self.buffered
        self._parts, self._tail = [], ""
        if len(remainder) >= self.config.min_trailing_length:
            records.append(remainder)
        elif remainder:
            logger.debug("Dropping %r left after the last record", remainder)

        return self._emitted(records)


class _SplitterFrontEnd:
    """Shared write/close plumbing; subclasses decide how records are delivered."""

    def __init__(self, config: SplitterConfig | None = None) -> None:
        self._splitter = RecordSplitter(config)

    @property
    def closed(self) -> bool:
        """True once the input has been closed."""
        return self._splitter.finished

    @property
    def records_emitted(self) -> int:
        """Number of records delivered so far."""
        return self._splitter.records_emitted

    def _deliver(self, record: str) -> None:
        raise NotImplementedError

    def write(self, chunk: Chunk) -> None:
        """Feed a chunk, delivering every record it completes."""
        for record in self._splitter.feed(chunk):
            self._deliver(record)

    def close(self) -> None:
        """Signal end of input, delivering the final records."""
        for record in self._splitter.finish():
            self._deliver(record)


class SDFSplitter(_SplitterFrontEnd):
    """Push-style splitter that calls ``handler`` once per record.

    Example:
        >>> seen = []
        >>> with SDFSplitter(seen.append) as splitter:
        ...     splitter.write("foo\\n$$$$\\nba")
        ...     splitter.write("r\\n$$$$\\n")
        >>> seen
        ['foo\\n', 'bar\\n']
    """

    def __init__(
        self, handler: RecordHandler, config: SplitterConfig | None = None
    ) -> None:
        """Initialize with the per-record callback.

        Args:
            handler: Called synchronously with each record's text
            config: Optional splitter settings
        """
        super().__init__(config)
        self.handler = handler

    def _deliver(self, record: str) -> None:
        self.handler(record)

    def __enter__(self) -> "SDFSplitter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is None and not self.closed:
            self.close()


class SDFTransform(_SplitterFrontEnd):
    """Pull-style splitter that queues records for the consumer.

    Records become readable as soon as the chunk completing them is
    written; the consumer drains them with ``read`` or by iterating.
    """

    def __init__(self, config: SplitterConfig | None = None) -> None:
        """Initialize with an empty output queue."""
        super().__init__(config)
        self._queue: deque[str] = deque()

    def _deliver(self, record: str) -> None:
        self._queue.append(record)

    @property
    def pending(self) -> int:
        """Number of records waiting to be read."""
        return len(self._queue)

    def read(self) -> str | None:
        """Return the next record, or None when none is ready."""
        return self._queue.popleft() if self._queue else None

    def __iter__(self) -> Iterator[str]:
        """Yield the queued records, oldest first."""
        while self._queue:
            yield self._queue.popleft()


def split_records(
    chunks: Iterable[Chunk], config: SplitterConfig | None = None
) -> Iterator[str]:
    """Yield the records of an SDF stream as chunks arrive.

    Args:
        chunks: Text or byte chunks of any size
        config: Optional splitter settings

    Yields:
        Record text, terminators removed, in source order
    """
    splitter = RecordSplitter(config)
    for chunk in chunks:
        yield from splitter.feed(chunk)
    yield from splitter.finish()


async def asplit_records(
    chunks: AsyncIterable[Chunk], config: SplitterConfig | None = None
) -> AsyncIterator[str]:
    """Async variant of ``split_records`` for async chunk sources."""
    splitter = RecordSplitter(config)
    async for chunk in chunks:
        for record in splitter.feed(chunk):
            yield record
    for record in splitter.finish():
        yield record


def iter_mol_records(
    chunks: Iterable[Chunk], config: SplitterConfig | None = None
) -> Iterator[MolRecord]:
    """Split an SDF stream and parse each record.

    Records parsed before an UnsupportedVersionError stay with the caller;
    the error propagates from the offending record.
    """
    for record in split_records(chunks, config):
        yield parse_mol(record)
