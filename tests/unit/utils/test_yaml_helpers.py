from __future__ import annotations

import pytest

from farkle.utils.yaml_helpers import expand_dotted_keys


def test_expand_dotted_keys_creates_nested_sections() -> None:
    data = {"game.victory_score": 5000, "game.seed": 1, "watch": {"max_turns": 10}}
    expanded = expand_dotted_keys(data)
    assert expanded == {"game": {"victory_score": 5000, "seed": 1}, "watch": {"max_turns": 10}}


def test_expand_dotted_keys_merges_with_plain_section() -> None:
    data = {"game": {"seed": 1}, "game.player_names": ["Ana", "Ben"]}
    expanded = expand_dotted_keys(data)
    assert expanded == {"game": {"seed": 1, "player_names": ["Ana", "Ben"]}}


def test_expand_dotted_keys_conflicting_leaf_raises() -> None:
    with pytest.raises(TypeError):
        expand_dotted_keys({"game": 1, "game.seed": 2})


def test_expand_dotted_keys_expands_inside_sections() -> None:
    expanded = expand_dotted_keys({"outer": {"inner.leaf": 1}})
    assert expanded == {"outer": {"inner": {"leaf": 1}}}
