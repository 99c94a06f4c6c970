"""Solver configuration, loadable from YAML and overridable from the command line."""

from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .core.rules import RuleSet


@dataclass
class SolverConfig:
    """Settings shared by the CLI commands."""
    rules: RuleSet = RuleSet.CLASSIC
    max_steps: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SolverConfig:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        config = cls()
        return merge_overrides(config, **data)


def merge_overrides(config: SolverConfig, **overrides) -> SolverConfig:
    """Apply every override that is not None. Rule names are parsed."""
    for k, v in overrides.items():
        if v is None:
            continue
        if k == "rules" and not isinstance(v, RuleSet):
            v = RuleSet.parse(str(v))
        if k == "max_steps":
            v = int(v)
            if v < 1:
                raise ValueError(f"max_steps must be positive, got {v}")
        setattr(config, k, v)
    return config


def load_config(path: Union[str, Path]) -> SolverConfig:
    """Read a YAML mapping such as ``{rules: extended, max_steps: 100000}``."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must contain a mapping")
    return SolverConfig.from_dict(data)
