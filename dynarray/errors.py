"""DynamicArray が送出する例外。

方針:
    - 一括入力（add_all）の不正はプログラミングエラーとして例外にする。
    - 単一要素の「見つからない/受け付けない」は bool の戻り値で表し、例外にしない。
    - 既存コードの except ValueError / except IndexError でも捕捉できるよう、
      組み込み例外を併せて継承する。
"""


class DynamicArrayError(Exception):
    """dynarray が送出する例外の基底クラス。"""


class InvalidArgumentError(DynamicArrayError, ValueError):
    """入力シーケンス自体が None、または None 要素を含む場合などに送出する。"""


class IndexOutOfBoundsError(DynamicArrayError, IndexError):
    """インデックスが [0, length) の範囲外の場合に送出する。"""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index: {index}, Size: {size}")
