"""Tests for solver configuration."""

import pytest
from chess_sudoku.config import SolverConfig, load_config, merge_overrides
from chess_sudoku.core.rules import RuleSet


def test_defaults():
    config = SolverConfig()
    assert config.rules is RuleSet.CLASSIC
    assert config.max_steps is None


def test_load_yaml(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text("rules: extended\nmax_steps: 5000\n")

    config = load_config(path)

    assert config.rules is RuleSet.EXTENDED
    assert config.max_steps == 5000


def test_empty_yaml(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text("")
    assert load_config(path) == SolverConfig()


def test_unknown_key(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text("rules: classic\ntimeout: 3\n")
    with pytest.raises(ValueError, match="timeout"):
        load_config(path)


def test_not_a_mapping(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text("- classic\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_overrides_skip_none():
    config = SolverConfig(rules=RuleSet.EXTENDED, max_steps=10)
    merge_overrides(config, rules=None, max_steps=None)
    assert config.rules is RuleSet.EXTENDED
    assert config.max_steps == 10


def test_overrides_parse_rule_names():
    config = merge_overrides(SolverConfig(), rules="extended", max_steps="20")
    assert config.rules is RuleSet.EXTENDED
    assert config.max_steps == 20


def test_bad_overrides():
    with pytest.raises(ValueError):
        merge_overrides(SolverConfig(), rules="jigsaw")
    with pytest.raises(ValueError):
        merge_overrides(SolverConfig(), max_steps=0)
