#!/usr/bin/env python3
"""成長トレースの可視化スクリプト

目的:
    main.py --output で保存した trace JSON を読み込み、
    追加回数に対する size と capacity の推移、および 1 追加あたりの累積コピー数を描く。

使い方:
    python scripts/visualize_growth_trace.py --trace outputs/trace.json --output-dir plots
"""

import argparse
import json
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd


def load_trace(trace_path: Path) -> pd.DataFrame:
    """trace JSON の履歴を DataFrame（1 行 = 1 回の追加）にする。"""
    with trace_path.open("r", encoding="utf-8") as f:
        payload = json.load(f)

    history = payload["history"]
    df = pd.DataFrame(
        {
            "size": history["size"],
            "capacity": history["capacity"],
            "grew": history["grew"],
            "copied": history["copied"],
        }
    )
    df.index = np.arange(1, len(df) + 1)
    df.index.name = "append"
    return df


def plot_size_and_capacity(df: pd.DataFrame, output_dir: Path) -> None:
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(df.index, df["size"], label="size")
    ax.step(df.index, df["capacity"], where="post", label="capacity")

    # 拡張が起きた位置に印を付ける
    grown = df[df["grew"]]
    ax.scatter(grown.index, grown["capacity"], marker="o", s=12, color="tab:red")

    ax.set_xlabel("append")
    ax.set_ylabel("slots")
    ax.set_title("Size vs Capacity")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    output_path = output_dir / "size_vs_capacity.png"
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    print(f"Saved plot to: {output_path}")
    plt.close(fig)


def plot_amortized_copies(df: pd.DataFrame, output_dir: Path) -> None:
    """累積コピー数 / 追加回数 の推移をプロット（2 未満に収まるはず）"""
    amortized = df["copied"].cumsum() / df.index.to_numpy()

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.plot(df.index, amortized)
    ax.axhline(2.0, linestyle="--", color="gray", alpha=0.7, label="bound = 2")
    ax.set_xlabel("append")
    ax.set_ylabel("copies per append")
    ax.set_title("Amortized copy cost")
    ax.legend(loc="upper right")
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    output_path = output_dir / "amortized_copies.png"
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    print(f"Saved plot to: {output_path}")
    plt.close(fig)


def main() -> None:
    parser = argparse.ArgumentParser(description="成長トレースの可視化")
    parser.add_argument(
        "--trace",
        type=Path,
        default=Path("outputs/trace.json"),
        help="main.py --output で保存した trace JSON",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("outputs/plots"),
        help="プロット保存先ディレクトリ",
    )

    args = parser.parse_args()

    if not args.trace.exists():
        print(f"Error: Trace file not found: {args.trace}")
        return

    df = load_trace(args.trace)
    print(f"Loaded {len(df)} appends from {args.trace}")

    args.output_dir.mkdir(parents=True, exist_ok=True)
    if df.empty:
        print("Trace is empty; nothing to plot.")
        return

    plot_size_and_capacity(df, args.output_dir)
    plot_amortized_copies(df, args.output_dir)

    print(f"\nAll plots saved to: {args.output_dir}")


if __name__ == "__main__":
    main()
