"""
Streaming loader for labeled feature vectors stored in delimited text files.
"""
from textloader.cursor import StreamingCursor
from textloader.exceptions import ArgumentError, FormatError, InvariantViolation, RangeError, TextLoaderError
from textloader.label_map import LabelMap
from textloader.layout import ColumnLayout, infer_layout
from textloader.loader import TextLoader, load
from textloader.parsers import DenseParser, ExampleParser, SparseParser
from textloader.vectors import DenseVector, Example, SparseVector

__version__ = '0.1'
