"""可変長配列コンテナ DynamicArray。

責務:
    - 連続した格納領域（dtype=object の NumPy 配列）に要素を順序どおり保持する
    - 満杯時の倍増による償却 O(1) の追加と、O(1) のインデックス参照を提供する
    - 値の等価性にもとづく線形探索で contains/remove を行う

設計意図:
    - 容量（capacity）と論理長（length）を明示的に分けて管理する
    - 拡張は「新しい領域を確保 → 既存要素をコピー → 置き換え」で行い、旧領域は捨てる
    - 容量は capacity() で観測できるようにし、内部属性の直接参照を不要にする

注意:
    None は「値なし」を表すため、add では受け付けず False を返す。
    add_all は None 自体や None を含む入力を InvalidArgumentError として扱う。
    スレッドセーフではない。並行アクセスが必要なら呼び出し側で排他すること。
"""

from __future__ import annotations

import operator
from typing import Any, Generic, Iterable, Iterator, List, Mapping, Optional

import numpy as np

from .errors import IndexOutOfBoundsError, InvalidArgumentError
from .types import Element, T

# 既定の初期容量。clear() でもこの値（またはインスタンスの初期容量）に戻る。
DEFAULT_CAPACITY = 10


def _allocate(capacity: int) -> np.ndarray:
    # dtype=object の np.empty は全スロットを None で初期化する。
    return np.empty(capacity, dtype=object)


def _values_equal(stored: Element, element: Element) -> bool:
    """2 つの要素が値として等しいかを返す。

    同一オブジェクトなら即 True。NumPy 配列同士（または片方）の場合は
    要素ごとの比較結果が配列になり真偽値が曖昧になるため、array_equal で判定する。
    """

    if stored is element:
        return True
    if isinstance(stored, np.ndarray) or isinstance(element, np.ndarray):
        return bool(np.array_equal(stored, element))
    return bool(stored == element)


def _validated(elements: Optional[Iterable[T]]) -> List[T]:
    """一括入力を検証し、list として確定させる。

    変更を行う前に全要素を走査するため、検証に失敗した場合コンテナは一切変化しない。
    ジェネレータのような一度しか走査できない入力もここで list 化しておく。
    """

    if elements is None:
        raise InvalidArgumentError("elements must not be None")
    items = list(elements)
    for position, item in enumerate(items):
        if item is None:
            raise InvalidArgumentError(
                f"elements contains None at position {position}"
            )
    return items


class SnapshotIterator(Iterator[T]):
    """生成時点の要素をコピーして走査するイテレータ。

    元のコンテナがその後変更されても、走査結果には影響しない。
    一度使い切ると再開できない（前方のみ）。
    """

    def __init__(self, snapshot: np.ndarray) -> None:
        self._snapshot = snapshot
        self._cursor = 0

    def __iter__(self) -> "SnapshotIterator[T]":
        return self

    def has_next(self) -> bool:
        return self._cursor < len(self._snapshot)

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        item = self._snapshot[self._cursor]
        self._cursor += 1
        return item


class DynamicArray(Generic[T]):
    """インデックスでアクセスできる可変長配列。

    格納領域:
        - _storage: 容量ぶんのスロットを持つ dtype=object の配列
        - _length: 有効な要素数（0 <= _length <= capacity）
        - スロット [_length, capacity) は常に None で、公開 API からは見えない

    成長規則:
        満杯（length == capacity）で追加するとき、容量を max(length * 2, 1) に広げる。
        N 回の追加でコピーされる要素の総数は O(N) に収まる。

    Examples:
        >>> values = DynamicArray([1, 2])
        >>> values.add(3)
        True
        >>> values.get(2)
        3
    """

    def __init__(
        self,
        elements: Optional[Iterable[T]] = None,
        initial_capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        if isinstance(initial_capacity, bool) or not isinstance(
            initial_capacity, (int, np.integer)
        ):
            raise InvalidArgumentError(
                f"initial_capacity must be an int: {initial_capacity!r}"
            )
        if initial_capacity < 0:
            raise InvalidArgumentError(
                f"initial_capacity must be >= 0: {initial_capacity}"
            )

        # clear() で戻す容量。
        self._initial_capacity = int(initial_capacity)

        if elements is None:
            self._storage = _allocate(self._initial_capacity)
            self._length = 0
            return

        # 既存のシーケンスから作る場合は余裕を持たせず、容量 = 要素数とする。
        items = _validated(elements)
        self._storage = _allocate(len(items))
        for position, item in enumerate(items):
            self._storage[position] = item
        self._length = len(items)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "DynamicArray[Any]":
        """設定辞書から DynamicArray を構築する。

        Args:
            config: initial_capacity（任意）と elements（任意のリスト）を持つ辞書。

        Returns:
            構築された DynamicArray。

        Raises:
            TypeError: 未知のキーが含まれる場合。
            InvalidArgumentError: initial_capacity や elements が不正な場合。
        """

        config_dict = dict(config)
        elements = config_dict.pop("elements", None)
        return cls(elements, **config_dict)

    # ------------------------------------------------------------------
    # 内部ヘルパ
    # ------------------------------------------------------------------

    def _check_index(self, index: int) -> int:
        # 負のインデックスは末尾からの参照として解釈しない。
        position = operator.index(index)
        if position < 0 or position >= self._length:
            raise IndexOutOfBoundsError(position, self._length)
        return position

    def _ensure_capacity(self, required: int) -> None:
        """required 個の要素を格納できるよう、必要なら領域を倍増して確保し直す。"""

        capacity = len(self._storage)
        if required <= capacity:
            return
        new_capacity = max(capacity * 2, 1)
        while new_capacity < required:
            new_capacity *= 2

        grown = _allocate(new_capacity)
        grown[: self._length] = self._storage[: self._length]
        self._storage = grown

    # ------------------------------------------------------------------
    # 変更系
    # ------------------------------------------------------------------

    def add(self, element: T) -> bool:
        """末尾に要素を追加する。

        Returns:
            追加できた場合 True。element が None の場合は何もせず False。
        """

        if element is None:
            return False
        self._ensure_capacity(self._length + 1)
        self._storage[self._length] = element
        self._length += 1
        return True

    def add_all(self, elements: Iterable[T]) -> bool:
        """入力シーケンスの全要素を順序どおり末尾に追加する。

        全要素を先に検証するので、失敗時は 1 件も追加されない（all-or-nothing）。

        Args:
            elements: 追加する要素の有限な反復可能オブジェクト。

        Returns:
            1 件以上追加された場合 True（入力が空なら False）。

        Raises:
            InvalidArgumentError: elements が None、または None 要素を含む場合。
        """

        items = _validated(elements)
        if not items:
            return False

        self._ensure_capacity(self._length + len(items))
        for item in items:
            self._storage[self._length] = item
            self._length += 1
        return True

    def remove(self, element: T) -> bool:
        """先頭から探して最初に等しい要素を 1 つ削除する。

        Returns:
            削除した場合 True。等しい要素がなければ変更せず False。
        """

        for position in range(self._length):
            if _values_equal(self._storage[position], element):
                self.remove_at(position)
                return True
        return False

    def remove_at(self, index: int) -> T:
        """指定位置の要素を削除して返す。後続の要素は 1 つ前に詰める。

        Raises:
            IndexOutOfBoundsError: index が [0, size()) の範囲外の場合。
        """

        position = self._check_index(index)
        removed = self._storage[position]
        last = self._length - 1
        if position < last:
            self._storage[position:last] = self._storage[position + 1 : self._length]
        # 空いた末尾スロットの参照を外す。
        self._storage[last] = None
        self._length = last
        return removed

    def clear(self) -> None:
        """全要素を捨て、容量も初期値に戻す。"""

        self._storage = _allocate(self._initial_capacity)
        self._length = 0

    # ------------------------------------------------------------------
    # 参照系
    # ------------------------------------------------------------------

    def get(self, index: int) -> T:
        """指定位置の要素を返す。

        Raises:
            IndexOutOfBoundsError: index < 0 または index >= size() の場合。
            TypeError: index が整数として扱えない場合。
        """

        return self._storage[self._check_index(index)]

    def size(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    def contains(self, element: T) -> bool:
        """等しい要素が 1 つでもあれば True。None は常に含まれないものとして扱う。"""

        if element is None:
            return False
        return any(
            _values_equal(self._storage[position], element)
            for position in range(self._length)
        )

    def capacity(self) -> int:
        """現在確保しているスロット数（未使用の末尾スロットを含む）。"""

        return len(self._storage)

    def iterator(self) -> SnapshotIterator[T]:
        """現時点の要素のコピーを走査するイテレータを返す。"""

        return SnapshotIterator(self._storage[: self._length].copy())

    def to_list(self) -> List[T]:
        return list(self._storage[: self._length])

    # ------------------------------------------------------------------
    # Python のプロトコル
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> SnapshotIterator[T]:
        return self.iterator()

    def __contains__(self, element: object) -> bool:
        return self.contains(element)  # type: ignore[arg-type]

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicArray):
            return NotImplemented
        if self._length != other._length:
            return False
        return all(
            _values_equal(self._storage[position], other._storage[position])
            for position in range(self._length)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
