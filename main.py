"""CLI エントリポイント。

目的:
    設定ファイル（TOML/JSON）から `GrowthTracer` を構築して DynamicArray への追加を繰り返し、
    容量の推移（拡張のタイミングとコピー量）を表示・保存する。

想定される例外:
    - 設定ファイルが存在しない: FileNotFoundError
    - JSON/TOML の構文エラー: パーサ由来の例外
    - [tracer] テーブルのキーが不正: TypeError
"""

import argparse
import json
import os
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

try:
    import matplotlib.pyplot as plt
except ImportError:
    plt = None

from dynarray.config import config_section, load_config
from dynarray.growth import GrowthTracer
from dynarray.logger import WandBLogger, wandb_available


def main(argv: Optional[Sequence[str]] = None) -> None:
    """コマンドライン引数を解釈し、成長トレースを実行する。

    Args:
        argv: 引数リスト。None の場合は `sys.argv` を argparse が参照する。
    """

    parser = argparse.ArgumentParser(description="DynamicArray growth trace runner")

    # --config 引数:
    # - 既定ではカレントディレクトリの config.toml を使う
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config.toml"),
        help="Path to a TOML or JSON config file.",
    )

    # --n-appends 引数:
    # - 設定ファイルの [tracer].n_appends を上書きする
    parser.add_argument(
        "--n-appends",
        type=int,
        default=None,
        help="Number of appends (overrides [tracer].n_appends).",
    )

    # --output 引数:
    # - 指定がない場合は出力しない
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Path to write trace JSON (optional).",
    )

    parser.add_argument(
        "--plot",
        action="store_true",
        help="Save size/capacity plot (requires matplotlib).",
    )

    args = parser.parse_args(argv)

    config = load_config(args.config)
    tracer_config = config_section(config, "tracer")
    if args.n_appends is not None:
        tracer_config["n_appends"] = args.n_appends

    # WandB ログの準備（任意）。
    wandb_logger = None
    wandb_project = os.getenv("WANDB_PROJECT")
    wandb_enabled = os.getenv("WANDB_ENABLED", "").lower() in {"1", "true", "yes"}
    if wandb_project or wandb_enabled:
        if not wandb_project:
            wandb_project = "dynarray"
        if wandb_available():
            wandb_logger = WandBLogger(project=wandb_project, name="growth-trace")
            wandb_logger.start_run(config={"config": config})
        else:
            print("WandB が利用できないためロギングをスキップします。")

    print("\n=== Run parameters ===")
    print(
        {
            "config_path": str(args.config),
            "output_path": str(args.output) if args.output is not None else None,
            "plot": bool(args.plot),
            "tracer": tracer_config,
        }
    )

    tracer = GrowthTracer.from_config(tracer_config)
    tracer.run()
    history = tracer.history_
    summary = tracer.summary()

    events = tracer.growth_events()
    pd.set_option("display.max_rows", 100)
    print("\n=== Growth events ===")
    print(events if not events.empty else "(no growth)")
    print("\n=== Summary ===")
    print(summary)

    if args.plot:
        if plt is None:
            print("matplotlib が利用できないためプロットをスキップします。")
        else:
            steps = range(1, len(history["size"]) + 1)
            fig, ax = plt.subplots(figsize=(8, 4))
            ax.plot(steps, history["size"], label="size")
            ax.step(steps, history["capacity"], where="post", label="capacity")
            ax.set_xlabel("append")
            ax.set_ylabel("slots")
            ax.set_title("DynamicArray size and capacity")
            ax.legend(loc="best")
            ax.grid(True, linestyle=":", alpha=0.6)
            output_path = Path("capacity_trace.png")
            fig.tight_layout()
            fig.savefig(output_path, dpi=150)
            print(f"Saved plot to {output_path}")
            plt.close(fig)

    if args.output is not None:
        output_path = args.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        result = {
            "history": history,
            "summary": summary,
            "growth_events": [
                {key: int(value) for key, value in row.items()}
                for row in events.to_dict(orient="records")
            ],
            "config": config,
        }
        with output_path.open("w", encoding="utf-8") as handle:
            json.dump(result, handle, ensure_ascii=False, indent=2)
        print(f"Saved trace JSON to {output_path}")

    if wandb_logger is not None:
        wandb_logger.log_history(history)
        wandb_logger.log_metrics(summary, prefix="summary")
        wandb_logger.finish()


if __name__ == "__main__":
    main()
