from __future__ import annotations

import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from dynarray.growth import GrowthTracer


def test_first_growth_at_eleventh_append() -> None:
    tracer = GrowthTracer(n_appends=11)
    array = tracer.run()
    history = tracer.history_

    if history["size"] != list(range(1, 12)):
        raise AssertionError(f"size history: {history['size']}")
    if history["capacity"] != [10] * 10 + [20]:
        raise AssertionError(f"capacity history: {history['capacity']}")
    if history["grew"] != [False] * 10 + [True]:
        raise AssertionError("only the 11th append should grow")
    if history["copied"][-1] != 10 or history["total_copied"] != 10:
        raise AssertionError("growth should copy the 10 existing elements")
    if array.to_list() != list(range(11)):
        raise AssertionError("elements should be retrievable in order")


def test_amortized_copy_bound() -> None:
    n = 1000
    tracer = GrowthTracer(n_appends=n)
    tracer.run()
    history = tracer.history_

    capacity = np.asarray(history["capacity"])
    if np.any(np.diff(capacity) < 0):
        raise AssertionError("capacity must never shrink while appending")
    if np.any(capacity < np.asarray(history["size"])):
        raise AssertionError("capacity must hold every element")
    if history["total_copied"] >= 2 * n:
        raise AssertionError(f"total copies not linear: {history['total_copied']}")
    if history["amortized_copies"] != history["total_copied"] / n:
        raise AssertionError("amortized_copies")

    summary = tracer.summary()
    if summary["final_capacity"] != 1280 or summary["n_growths"] != 7:
        raise AssertionError(f"unexpected summary: {summary}")


def test_growth_events_from_zero_capacity() -> None:
    tracer = GrowthTracer(n_appends=5, initial_capacity=0)
    tracer.run()
    if tracer.history_["capacity"] != [1, 2, 4, 4, 8]:
        raise AssertionError(f"capacity history: {tracer.history_['capacity']}")

    events = tracer.growth_events()
    if events["step"].tolist() != [0, 1, 2, 4]:
        raise AssertionError(f"event steps: {events['step'].tolist()}")
    if events["old_capacity"].tolist() != [0, 1, 2, 4]:
        raise AssertionError("old_capacity column")
    if events["new_capacity"].tolist() != [1, 2, 4, 8]:
        raise AssertionError("new_capacity column")
    if events["copied"].tolist() != [0, 1, 2, 4]:
        raise AssertionError("copied column")


def test_zero_appends() -> None:
    tracer = GrowthTracer(n_appends=0)
    array = tracer.run()
    if not array.is_empty() or tracer.history_["amortized_copies"] is not None:
        raise AssertionError("zero appends should leave an empty trace")
    events = tracer.growth_events()
    if not events.empty or list(events.columns) != [
        "step",
        "old_capacity",
        "new_capacity",
        "copied",
    ]:
        raise AssertionError("empty events table should keep its columns")


def test_custom_elements_and_errors() -> None:
    tracer = GrowthTracer(n_appends=3)
    array = tracer.run(["a", "b", "c", "d"])
    if array.to_list() != ["a", "b", "c"]:
        raise AssertionError("only n_appends elements should be added")

    for bad in (["a", None, "c"], ["a"]):
        try:
            GrowthTracer(n_appends=3).run(bad)
        except ValueError:
            pass
        else:
            raise AssertionError(f"run({bad}) should raise ValueError")

    try:
        GrowthTracer(n_appends=-1).run()
    except ValueError:
        pass
    else:
        raise AssertionError("negative n_appends should raise ValueError")

    try:
        GrowthTracer(n_appends=1).growth_events()
    except RuntimeError:
        pass
    else:
        raise AssertionError("growth_events before run should raise RuntimeError")


def test_from_config() -> None:
    tracer = GrowthTracer.from_config(
        {"n_appends": 3, "initial_capacity": 2, "show_progress": False}
    )
    tracer.run()
    if tracer.summary()["final_capacity"] != 4:
        raise AssertionError("from_config should honor initial_capacity")

    try:
        GrowthTracer.from_config({"n_appends": 3, "unknown": 1})
    except TypeError:
        pass
    else:
        raise AssertionError("unknown key should raise TypeError")


def main() -> None:
    test_first_growth_at_eleventh_append()
    test_amortized_copy_bound()
    test_growth_events_from_zero_capacity()
    test_zero_appends()
    test_custom_elements_and_errors()
    test_from_config()

    print("OK: growth trace checks passed")


if __name__ == "__main__":
    main()
