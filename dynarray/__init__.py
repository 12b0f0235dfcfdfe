"""dynarray パッケージ。

外部に公開する API（コンテナと例外、成長トレーサ）をここで再エクスポートする。
利用者は基本的に `from dynarray import DynamicArray` の形で import できる。
"""

from .array import DEFAULT_CAPACITY, DynamicArray, SnapshotIterator
from .errors import DynamicArrayError, IndexOutOfBoundsError, InvalidArgumentError
from .growth import GrowthTracer

__all__ = [
    "DEFAULT_CAPACITY",
    "DynamicArray",
    "DynamicArrayError",
    "GrowthTracer",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
    "SnapshotIterator",
]
