"""
Line parsers turning one data row into an Example.

``ExampleParser`` resolves label, weight and name; ``DenseParser`` and
``SparseParser`` each build the feature vector for their row format.
"""
import re
from typing import List, Optional
from textloader.exceptions import FormatError, RangeError
from textloader.label_map import LabelMap
from textloader.layout import ColumnLayout
from textloader.vectors import DenseVector, Example, SparseVector

INDEX_PATTERN = re.compile(r'[0-9]+', re.ASCII)
FLOAT_PATTERN = re.compile(r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)',
                           re.ASCII | re.IGNORECASE)


def parse_float(text: str, what: str) -> float:
    if not FLOAT_PATTERN.fullmatch(text):
        raise FormatError(f"Can't parse {what} {text!r} as a number")
    return float(text)


class ExampleParser:
    """Shared line-parsing logic. Holds no per-line state."""
    def __init__(self, layout: ColumnLayout, separator: str = '\t', label_map: Optional[LabelMap] = None):
        self.layout = layout
        self.dimension = layout.dimension
        self.label_column = layout.label_column
        self.weight_column = layout.weight_column
        self.name_column = layout.name_column
        self.separator = separator
        self.label_map = label_map if label_map is not None else LabelMap()
        self._min_columns = max(layout.role_columns) + 1

    def parse(self, line: str) -> Example:
        columns = line.rstrip('\r\n').split(self.separator)
        if len(columns) < self._min_columns:
            raise FormatError(f"Wrong number of columns: expected at least {self._min_columns}, got {len(columns)}")

        label_text = columns[self.label_column]
        if self.label_map:
            label = self.label_map.lookup(label_text)
        else:
            label = parse_float(label_text, 'label')
        weight = parse_float(columns[self.weight_column], 'weight') if self.weight_column is not None else 1.0
        name = columns[self.name_column] if self.name_column is not None else None
        return Example(self.parse_features(columns), label, weight, name)

    def parse_features(self, columns: List[str]):
        raise NotImplementedError


class DenseParser(ExampleParser):
    """Reads every feature at a fixed column position."""
    def __init__(self, layout: ColumnLayout, separator: str = '\t', label_map: Optional[LabelMap] = None):
        super().__init__(layout, separator, label_map)
        self.parse_indices = layout.feature_columns

    def parse_features(self, columns: List[str]) -> DenseVector:
        if self.parse_indices and len(columns) <= self.parse_indices[-1]:
            raise FormatError(f"Wrong number of columns: expected {self.parse_indices[-1] + 1}, got {len(columns)}")
        return DenseVector([parse_float(columns[i], 'feature value') for i in self.parse_indices])


class SparseParser(ExampleParser):
    """Reads ``index:value`` tokens following the leading non-feature columns."""
    def __init__(self, layout: ColumnLayout, separator: str = '\t', label_map: Optional[LabelMap] = None):
        super().__init__(layout, separator, label_map)
        # feature tokens start here
        self.feature_column_offset = 1 + (self.weight_column is not None) + (self.name_column is not None)
        if any(c >= self.feature_column_offset for c in layout.role_columns):
            raise RangeError("Sparse instances require that all non-feature columns are in the front")

    def parse_features(self, columns: List[str]) -> SparseVector:
        count = len(columns) - self.feature_column_offset
        if not 0 < count <= self.dimension:
            raise FormatError(f"Number of feature tokens out of range: {count} (dimension {self.dimension})")

        indices = [0] * count
        values = [0.0] * count
        last_index = -1
        for i, token in enumerate(columns[self.feature_column_offset:]):
            index_text, colon, value_text = token.partition(':')
            if not colon or not INDEX_PATTERN.fullmatch(index_text) or not FLOAT_PATTERN.fullmatch(value_text):
                raise FormatError(f"Can't parse {token!r}")
            index = int(index_text)
            if index <= last_index:
                raise FormatError(f"Indices are not ordered at {token!r}")
            if index >= self.dimension:
                raise FormatError(f"Index out of range at {token!r} (dimension {self.dimension})")
            indices[i] = index
            values[i] = float(value_text)
            last_index = index
        return SparseVector(self.dimension, indices, values)
