"""
Label map loading: translates textual labels into numeric targets.
"""
import os
import logging
from typing import Dict, Optional
from textloader.exceptions import ArgumentError, FormatError

logger = logging.getLogger(__name__)


class LabelMap:
    """Immutable string to float lookup. An empty map means labels are plain floats."""
    def __init__(self, mapping: Optional[Dict[str, float]] = None):
        self._mapping = dict(mapping or {})

    @classmethod
    def from_file(cls, path: Optional[str]) -> 'LabelMap':
        """
        Load a label map side file (tab separated, no header).

        Two shapes are accepted. With one column every line is a key and keys
        are numbered 0, 1, 2, ... in file order. With two columns every line
        is ``key<TAB>value`` and the value must be a float literal.
        """
        if path is None or not str(path).strip():
            return cls()
        if not os.path.isfile(path):
            raise ArgumentError(f"Can't locate or read label map file: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                lines = [line.rstrip('\r\n') for line in f]
        except UnicodeDecodeError as e:
            raise FormatError(f"Label map file {path} is not valid UTF-8") from e
        except OSError as e:
            raise ArgumentError(f"Can't locate or read label map file: {path}") from e
        lines = [line for line in lines if line.strip()]
        if len(lines) < 2:
            raise FormatError("Label map file must contain more than 1 line.")
        if len(lines[0].split('\t')) > 2:
            raise FormatError("Label map file can't have more than 2 columns")

        mapping = {}
        if len(lines[0].split('\t')) == 1:
            for counter, key in enumerate(lines):
                if key in mapping:
                    raise FormatError(f"Duplicate key in label map file: {key!r}")
                mapping[key] = float(counter)
            form = 'enumerated'
        else:
            for line in lines:
                tokens = line.split('\t')
                if len(tokens) != 2:
                    raise FormatError(f"Incorrect number of columns in label map file: {line!r}")
                key, value = tokens
                try:
                    mapping[key] = float(value)
                except ValueError as e:
                    raise FormatError(f"Invalid label map file format: {line!r}") from e
            form = 'key/value'
        logger.info(f"Loaded {form} label map with {len(mapping)} labels from {path}")
        return cls(mapping)

    def lookup(self, key: str) -> float:
        try:
            return self._mapping[key]
        except KeyError:
            raise FormatError(f"Label {key!r} is not in the label map") from None

    def __getitem__(self, key: str) -> float:
        return self.lookup(key)

    def __len__(self):
        return len(self._mapping)

    def __bool__(self):
        return bool(self._mapping)
