"""
Header analysis: decides which columns are label, weight, name and features.
"""
from typing import List, Optional
from textloader.exceptions import ArgumentError, FormatError, RangeError


class ColumnLayout:
    """Column roles inferred from a header line."""
    def __init__(self, column_names: List[str], feature_names: List[str], label_column: int,
                 weight_column: Optional[int], name_column: Optional[int], non_feature: List[bool]):
        self.column_names = column_names
        self.feature_names = feature_names
        self.label_column = label_column
        self.weight_column = weight_column
        self.name_column = name_column
        self.non_feature = non_feature

    @property
    def num_columns(self) -> int:
        return len(self.non_feature)

    @property
    def dimension(self) -> int:
        return len(self.feature_names)

    @property
    def feature_columns(self) -> List[int]:
        return [i for i, skip in enumerate(self.non_feature) if not skip]

    @property
    def role_columns(self) -> List[int]:
        return [c for c in (self.label_column, self.weight_column, self.name_column) if c is not None]

    def __repr__(self):
        return (f"ColumnLayout(features={self.feature_names}, label={self.label_column}, "
                f"weight={self.weight_column}, name={self.name_column})")


def infer_layout(columns: List[str], label_column: Optional[int] = None, weight_column: Optional[int] = None,
                 name_column: Optional[int] = None) -> ColumnLayout:
    num_cols = len(columns)
    non_feature = [False] * num_cols

    explicit = {'Label': label_column, 'Weight': weight_column, 'Name': name_column}
    seen = {}
    for role, index in explicit.items():
        if index is None:
            continue
        if not 0 <= index < num_cols:
            raise RangeError(f"{role} column out of range: {index} (header has {num_cols} columns)")
        if index in seen:
            raise ArgumentError(f"{role} column {index} is already used as the {seen[index].lower()} column")
        seen[index] = role
        non_feature[index] = True

    feature_names = []
    for i, name in enumerate(columns):
        if non_feature[i]:
            continue
        if label_column is None:
            non_feature[i] = True
            label_column = i
        else:
            feature_names.append(name)

    if label_column is None:
        raise FormatError("Header has no column left to use as the label")
    return ColumnLayout(list(columns), feature_names, label_column, weight_column, name_column, non_feature)
