"""DynamicArray の成長過程を記録するトレーサ。

責務:
    - 空のコンテナに N 回 add し、1 回ごとの size/capacity と拡張の有無を履歴に残す
    - 拡張時にコピーされた要素数を積算し、償却コスト（1 追加あたりのコピー数）を求める

設計意図:
    - コンテナ自体には計測用のフックを持たせず、capacity() の前後比較だけで観測する
    - 履歴は「キー → 反復ごとのリスト」の辞書として保持し、JSON/WandB へそのまま渡せる形にする
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

import pandas as pd
from tqdm.auto import tqdm

from .array import DEFAULT_CAPACITY, DynamicArray
from .types import Element


class GrowthTracer:
    """追加を繰り返して容量の推移を記録するクラス。

    sklearn 風の作法:
        - __init__ では引数を属性に保存するだけ
        - run により array_ / history_ を設定する
    """

    def __init__(
        self,
        n_appends: int,
        initial_capacity: int = DEFAULT_CAPACITY,
        show_progress: bool = False,
    ) -> None:
        self.n_appends = n_appends
        self.initial_capacity = initial_capacity
        self.show_progress = show_progress

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "GrowthTracer":
        """辞書（設定ファイルの [tracer] テーブル）からトレーサを構築する。

        Raises:
            TypeError: config が __init__ 引数と整合しない場合（余計なキー/不足）。
        """

        return cls(**dict(config))

    def run(self, elements: Optional[Iterable[Element]] = None) -> DynamicArray[Any]:
        """新しいコンテナに要素を 1 つずつ追加し、履歴を記録する。

        Args:
            elements: 追加する要素。None の場合は range(n_appends) を使う。
                指定した場合も先頭 n_appends 個までしか追加しない。

        Returns:
            追加を終えたコンテナ（array_ と同じもの）。

        Raises:
            ValueError: n_appends が負の場合、または elements が n_appends 個に満たない場合。
        """

        n_appends = int(self.n_appends)
        if n_appends < 0:
            raise ValueError(f"n_appends must be >= 0: {n_appends}")

        source = iter(range(n_appends) if elements is None else elements)
        array: DynamicArray[Any] = DynamicArray(
            initial_capacity=self.initial_capacity
        )

        history: Dict[str, Any] = {
            # 追加後の要素数
            "size": [],
            # 追加後の容量
            "capacity": [],
            # この追加で領域の確保し直しが起きたか
            "grew": [],
            # 確保し直しでコピーされた既存要素の数
            "copied": [],
        }

        total_copied = 0
        n_growths = 0
        for _ in tqdm(
            range(n_appends),
            desc="append",
            leave=False,
            disable=not self.show_progress,
        ):
            try:
                element = next(source)
            except StopIteration:
                raise ValueError(
                    f"elements ran out before {n_appends} appends"
                ) from None

            before_size = array.size()
            before_capacity = array.capacity()
            if not array.add(element):
                raise ValueError("elements must not contain None")
            grew = array.capacity() != before_capacity
            copied = before_size if grew else 0

            total_copied += copied
            n_growths += int(grew)
            history["size"].append(array.size())
            history["capacity"].append(array.capacity())
            history["grew"].append(grew)
            history["copied"].append(copied)

        history["total_copied"] = total_copied
        history["n_growths"] = n_growths
        history["amortized_copies"] = (
            total_copied / n_appends if n_appends > 0 else None
        )

        self.array_ = array
        self.history_ = history
        return array

    def growth_events(self) -> pd.DataFrame:
        """拡張が起きた追加だけを 1 行ずつ並べた表を返す。

        列: step（0 始まりの追加番号）, old_capacity, new_capacity, copied

        Raises:
            RuntimeError: run() より前に呼ばれた場合。
        """

        if not hasattr(self, "history_"):
            raise RuntimeError("run() must be called before growth_events()")

        history = self.history_
        rows = []
        previous_capacity = int(self.initial_capacity)
        for step, (capacity, grew, copied) in enumerate(
            zip(history["capacity"], history["grew"], history["copied"])
        ):
            if grew:
                rows.append(
                    {
                        "step": step,
                        "old_capacity": previous_capacity,
                        "new_capacity": capacity,
                        "copied": copied,
                    }
                )
            previous_capacity = capacity
        return pd.DataFrame(
            rows, columns=["step", "old_capacity", "new_capacity", "copied"]
        )

    def summary(self) -> Dict[str, Any]:
        """最後の状態と集計値をまとめた辞書を返す。"""

        if not hasattr(self, "history_"):
            raise RuntimeError("run() must be called before summary()")

        return {
            "n_appends": int(self.n_appends),
            "final_size": self.array_.size(),
            "final_capacity": self.array_.capacity(),
            "n_growths": self.history_["n_growths"],
            "total_copied": self.history_["total_copied"],
            "amortized_copies": self.history_["amortized_copies"],
        }
