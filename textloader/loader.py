"""
Text dataset loading: header inference, dense/sparse detection and cursor setup.
"""
import os
import logging
import numpy as np
import pandas as pd
from typing import IO, Iterator, List, Optional, Tuple
from textloader.cursor import StreamingCursor, read_line
from textloader.exceptions import ArgumentError, FormatError
from textloader.label_map import LabelMap
from textloader.layout import infer_layout
from textloader.parsers import DenseParser, ExampleParser, SparseParser
from textloader.vectors import Example

logger = logging.getLogger(__name__)

COMMENT_MARKER = '//'


def read_header(file: IO[bytes], filename: str = '') -> str:
    """Return the first line that is neither blank nor a ``//`` comment."""
    while True:
        line = read_line(file)
        if not line:
            raise FormatError(f"{filename} doesn't contain any data")
        header = line.strip()
        if header and not header.startswith(COMMENT_MARKER):
            return header


def probe_data_row(file: IO[bytes], separator: str, num_columns: int, filename: str = '') -> Tuple[int, bool]:
    """Read the first data row and report where it starts and whether the file is sparse."""
    data_start_offset = file.tell()
    line = read_line(file)
    if not line:
        raise FormatError(f"{filename} has a header but no data rows")
    column_count = len(line.rstrip('\r\n').split(separator))
    if column_count > num_columns:
        raise FormatError(f"Invalid data: first row has {column_count} columns, header has {num_columns}")
    return data_start_offset, column_count < num_columns


class TextLoader:
    """
    Loads labeled examples from a delimited text file.

    The header names the columns. Label, weight and name columns may be given
    explicitly by index; otherwise the first column is the label and the rest
    are features. The first data row decides the format: as many columns as
    the header means dense, fewer means sparse ``index:value`` tokens.

    Args:
        filename: Path to the data file.
        separator: Single column separator character.
        label_column: Index of the label column, inferred when None.
        weight_column: Index of the weight column, if any.
        name_column: Index of the name column, if any.
        label_map_file: Optional label map file translating textual labels.
        cache: Read every example into memory at load time.
    """
    def __init__(self, filename: str, separator: str = '\t', label_column: Optional[int] = None,
                 weight_column: Optional[int] = None, name_column: Optional[int] = None,
                 label_map_file: Optional[str] = None, cache: bool = True):
        if not isinstance(separator, str) or len(separator) != 1:
            raise ArgumentError(f"Separator must be a single character, got {separator!r}")
        if not os.path.isfile(filename):
            raise ArgumentError(f"Can't locate or read data file: {filename}")
        self.filename = filename
        self.separator = separator

        try:
            file = open(filename, 'rb')
        except OSError as e:
            raise ArgumentError(f"Can't locate or read data file: {filename}") from e
        try:
            header = read_header(file, filename)
            self.layout = infer_layout(header.split(separator), label_column, weight_column, name_column)
            logger.info(f"Header of {filename}: {self.layout.num_columns} columns, label column {self.layout.label_column}, "
                        f"weight column {self.layout.weight_column}, name column {self.layout.name_column}")

            data_start_offset, self.is_sparse = probe_data_row(file, separator, self.layout.num_columns, filename)
            label_map = LabelMap.from_file(label_map_file)
            parser_class = SparseParser if self.is_sparse else DenseParser
            self.parser: ExampleParser = parser_class(self.layout, separator, label_map)
            logger.info(f"Detected {'sparse' if self.is_sparse else 'dense'} format with dimension {self.dimension}")

            self.cursor = StreamingCursor(file, data_start_offset, self.parser)
        except Exception:
            file.close()
            raise

        if cache:
            try:
                self.cursor.cache()
            except Exception:
                self.cursor.close()
                raise

    @property
    def feature_names(self) -> List[str]:
        return self.layout.feature_names

    @property
    def dimension(self) -> int:
        return self.layout.dimension

    @property
    def is_cached(self) -> bool:
        return self.cursor.is_cached

    def __iter__(self) -> Iterator[Example]:
        return iter(self.cursor)

    def examples(self) -> List[Example]:
        return list(self.cursor)

    def to_dataframe(self) -> pd.DataFrame:
        """All examples as a DataFrame: feature columns, then label, weight and name."""
        examples = self.examples()
        matrix = np.vstack([ex.features.to_dense() for ex in examples]) if self.dimension else np.empty((len(examples), 0))
        df = pd.DataFrame(matrix, columns=self.feature_names)
        names = self.layout.column_names
        df[names[self.layout.label_column]] = [ex.label for ex in examples]
        if self.layout.weight_column is not None:
            df[names[self.layout.weight_column]] = [ex.weight for ex in examples]
        if self.layout.name_column is not None:
            df[names[self.layout.name_column]] = [ex.name for ex in examples]
        return df

    def close(self):
        self.cursor.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def load(filename: str, **options) -> TextLoader:
    return TextLoader(filename, **options)
