"""型定義。

コンテナは要素型に対してジェネリックであり、格納領域は dtype=object の
NumPy 配列なので、要素そのものの型には制約を設けない。
"""

from typing import Any, TypeVar

# T:
# - DynamicArray[T] の要素型を表す型変数。
T = TypeVar("T")

# Element:
# - 要素型を特定しない箇所（検証ヘルパや履歴の記録など）で使う型。
Element = Any
