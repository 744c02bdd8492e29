from dataclasses import dataclass, replace
from typing import Any, Dict, Optional
import os

import yaml

NON_ASCII_POLICIES = ("latin-1", "strict", "replace")


@dataclass
class EngineConfig:
    """Engine settings.

    max_steps: abort with StepLimitExceeded after this many steps (None = unbounded)
    non_ascii: what Output does with cell values 128-255
        latin-1  emit chr(value) (default)
        strict   raise NonAsciiOutputError
        replace  emit U+FFFD
    """
    max_steps: Optional[int] = None
    non_ascii: str = "latin-1"

    def __post_init__(self):
        if self.max_steps is not None:
            if not isinstance(self.max_steps, int) or isinstance(self.max_steps, bool) or self.max_steps < 0:
                raise ValueError(f"max_steps must be a non-negative integer, got {self.max_steps!r}")
        if self.non_ascii not in NON_ASCII_POLICIES:
            raise ValueError(f"non_ascii must be one of {', '.join(NON_ASCII_POLICIES)}; got {self.non_ascii!r}")

    @classmethod
    def from_env(cls, base: Optional["EngineConfig"] = None) -> "EngineConfig":
        """Overlay TAPEVM_STEP_LIMIT / TAPEVM_NON_ASCII on ``base`` (or the defaults)."""
        cfg = base or cls()
        changes: Dict[str, Any] = {}
        limit = os.environ.get("TAPEVM_STEP_LIMIT")
        if limit:
            try:
                changes["max_steps"] = int(limit)
            except ValueError:
                raise ValueError(f"TAPEVM_STEP_LIMIT must be an integer, got {limit!r}") from None
        policy = os.environ.get("TAPEVM_NON_ASCII")
        if policy:
            changes["non_ascii"] = policy
        return replace(cfg, **changes) if changes else cfg


def load_config(path: str) -> EngineConfig:
    """Load an EngineConfig from a YAML mapping with keys max_steps / non_ascii.
    An empty file gives the defaults.
    """
    with open(path, "r") as f:
        data = yaml.safe_load(f.read())

    if data is None:
        return EngineConfig()
    if not isinstance(data, dict):
        raise ValueError("config file must contain a mapping")

    unknown = set(data) - {"max_steps", "non_ascii"}
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(sorted(unknown))}")
    return EngineConfig(**data)
