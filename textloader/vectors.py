"""
Feature vector and example value types produced by the parsers.
"""
import numpy as np
from typing import Optional, Sequence


class DenseVector:
    """All feature values, one per schema column, in header order."""
    def __init__(self, values: Sequence[float]):
        self.values = np.asarray(values, dtype=np.float64)

    @property
    def dimension(self) -> int:
        return len(self.values)

    def __len__(self):
        return self.dimension

    def to_dense(self) -> np.ndarray:
        return self.values.copy()

    def __eq__(self, other):
        if not isinstance(other, DenseVector):
            return NotImplemented
        return np.array_equal(self.values, other.values)

    def __repr__(self):
        return f"DenseVector({self.values.tolist()})"


class SparseVector:
    """Present features only, as strictly ascending (index, value) pairs."""
    def __init__(self, dimension: int, indices: Sequence[int], values: Sequence[float]):
        self._dimension = dimension
        self.indices = np.asarray(indices, dtype=np.int64)
        self.values = np.asarray(values, dtype=np.float64)

    @property
    def dimension(self) -> int:
        return self._dimension

    def __len__(self):
        return self._dimension

    def items(self):
        return list(zip(self.indices.tolist(), self.values.tolist()))

    def to_dense(self) -> np.ndarray:
        dense = np.zeros(self._dimension, dtype=np.float64)
        dense[self.indices] = self.values
        return dense

    def __eq__(self, other):
        if not isinstance(other, SparseVector):
            return NotImplemented
        return (self._dimension == other._dimension
                and np.array_equal(self.indices, other.indices)
                and np.array_equal(self.values, other.values))

    def __repr__(self):
        return f"SparseVector({self._dimension}, {self.items()})"


class Example:
    """One parsed data row. Owned by the caller once returned."""
    def __init__(self, features, label: float, weight: float = 1.0, name: Optional[str] = None):
        self.features = features
        self.label = label
        self.weight = weight
        self.name = name

    def __eq__(self, other):
        if not isinstance(other, Example):
            return NotImplemented
        return (self.features == other.features and self.label == other.label
                and self.weight == other.weight and self.name == other.name)

    def __repr__(self):
        return f"Example(features={self.features!r}, label={self.label}, weight={self.weight}, name={self.name!r})"
