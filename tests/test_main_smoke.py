from __future__ import annotations

import json
import sys
import tempfile
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import main as cli


def test_main_writes_trace_json() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        config_path = Path(tmp) / "config.json"
        config_path.write_text(
            json.dumps({"tracer": {"n_appends": 5, "show_progress": False}}),
            encoding="utf-8",
        )
        output_path = Path(tmp) / "out" / "trace.json"

        cli.main(
            [
                "--config",
                str(config_path),
                "--n-appends",
                "21",
                "--output",
                str(output_path),
            ]
        )

        if not output_path.exists():
            raise AssertionError("trace JSON not written")
        with output_path.open("r", encoding="utf-8") as handle:
            result = json.load(handle)

    summary = result["summary"]
    if summary["n_appends"] != 21 or summary["final_size"] != 21:
        raise AssertionError(f"summary mismatch: {summary}")
    if summary["final_capacity"] != 40 or summary["n_growths"] != 2:
        raise AssertionError(f"growth mismatch: {summary}")
    if [event["step"] for event in result["growth_events"]] != [10, 20]:
        raise AssertionError(f"growth events: {result['growth_events']}")
    if len(result["history"]["capacity"]) != 21:
        raise AssertionError("history length mismatch")


def main() -> None:
    test_main_writes_trace_json()
    print("OK: main.py smoke test passed")


if __name__ == "__main__":
    main()
