"""
Resettable cursor over the data rows of a text dataset.
"""
import logging
from typing import IO, Iterator, List, Optional
from textloader.exceptions import FormatError, InvariantViolation
from textloader.parsers import ExampleParser
from textloader.vectors import Example

logger = logging.getLogger(__name__)


def read_line(file: IO[bytes]) -> str:
    """Read one line and decode it as UTF-8. Returns an empty string at end of file."""
    raw = file.readline()
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise FormatError(f"Line is not valid UTF-8: {raw!r}") from e


class StreamingCursor:
    """
    Exposes one current example plus ``reset``/``move_next``.

    In streaming mode rows are parsed from the file on demand. After
    ``cache()`` every example lives in memory, the file handle is released
    and ``reset``/``move_next`` only move an index.
    """
    def __init__(self, file: IO[bytes], data_start_offset: int, parser: ExampleParser):
        self._file = file
        self.data_start_offset = data_start_offset
        self.parser = parser
        self.current: Optional[Example] = None
        self._cache: Optional[List[Example]] = None
        self._position = 0
        self.reset()

    @property
    def is_cached(self) -> bool:
        return self._cache is not None

    @property
    def closed(self) -> bool:
        return self._file is None

    def reset(self):
        if self._cache is not None:
            self._position = 0
            self.current = self._cache[0]
            return
        self._check_open()
        self._file.seek(self.data_start_offset)
        line = read_line(self._file)
        if not line:
            raise InvariantViolation("First data row disappeared from the data file")
        self.current = None
        self.current = self.parser.parse(line)

    def move_next(self) -> bool:
        if self._cache is not None:
            self._position = min(self._position + 1, len(self._cache))
            if self._position < len(self._cache):
                self.current = self._cache[self._position]
                return True
            self.current = None
            return False
        self._check_open()
        line = read_line(self._file)
        if not line:
            self.current = None
            return False
        self.current = self.parser.parse(line)
        return True

    def cache(self) -> int:
        """Read every row into memory and release the file."""
        if self._cache is not None:
            return len(self._cache)
        self.reset()
        examples = [self.current]
        while self.move_next():
            examples.append(self.current)
        self.close()
        self._cache = examples
        self.reset()
        logger.info(f"Cached {len(examples)} examples")
        return len(examples)

    def __iter__(self) -> Iterator[Example]:
        self.reset()
        yield self.current
        while self.move_next():
            yield self.current

    def _check_open(self):
        if self._file is None:
            raise ValueError("Cursor is closed")

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
