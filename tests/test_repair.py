from __future__ import annotations

import json

from jsonrescue import Strategy, try_fix_json
from jsonrescue.repair import REPAIR_STEPS


def test_repairs_compose_across_steps() -> None:
    candidate = try_fix_json("{a: 'b', c: 1,}")

    assert candidate is not None
    assert candidate.strategy is Strategy.REPAIRED
    assert candidate.text == '{"a": "b", "c": 1}'
    assert json.loads(candidate.text) == {"a": "b", "c": 1}


def test_each_step_builds_on_the_previous_one() -> None:
    # the quote fix alone would leave the trailing comma in place
    candidate = try_fix_json("{'a': 1,}")

    assert candidate is not None
    assert candidate.text == '{"a": 1}'


def test_first_valid_step_short_circuits() -> None:
    candidate = try_fix_json('{"a": "it\'s fine",}')

    assert candidate is not None
    assert candidate.text == '{"a": "it\'s fine"}'


def test_doubled_backslashes_are_collapsed() -> None:
    candidate = try_fix_json('{"a": "\\\\\\"}')

    assert candidate is not None
    assert candidate.text == '{"a": "\\\\"}'
    assert json.loads(candidate.text) == {"a": "\\"}


def test_failing_step_is_skipped() -> None:
    def explode(text: str) -> str:
        raise RuntimeError("boom")

    steps = (("explode", explode),) + REPAIR_STEPS

    candidate = try_fix_json("[1, 2,]", steps=steps)

    assert candidate is not None
    assert candidate.text == "[1, 2]"


def test_exhausted_repairs_return_none() -> None:
    assert try_fix_json("not json at all") is None
    assert try_fix_json("42,") is None
    assert try_fix_json("") is None
    assert try_fix_json(None) is None


def test_repair_step_order_is_fixed() -> None:
    names = [name for name, _ in REPAIR_STEPS]

    assert names == ["trailing_commas", "single_quotes", "unquoted_keys", "double_backslashes"]
