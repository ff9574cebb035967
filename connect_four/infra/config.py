"""Environment-driven settings: `.env` file chain and `AppConfig`."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from connect_four.ai.monte_carlo import DEFAULT_PLAYOUTS
from connect_four.app.pacing import DEFAULT_REVEAL_BASE_MS, DEFAULT_REVEAL_SPREAD_MS
from connect_four.core.models import DEFAULT_COLS, DEFAULT_ROWS

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env.app",
    "appdata/config/.env.app.local",
    ".env",
    ".env.local",
)
AI_CHOICES: tuple[str, ...] = ("montecarlo", "random")
_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Immutable game configuration sourced from environment."""

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    cell_px: int = 100
    reveal_base_ms: float = DEFAULT_REVEAL_BASE_MS
    reveal_spread_ms: float = DEFAULT_REVEAL_SPREAD_MS
    ai: str = "montecarlo"
    ai_playouts: int = DEFAULT_PLAYOUTS
    seed: int | None = None
    debug_input: bool = False

    @property
    def canvas_size(self) -> tuple[int, int]:
        """Intrinsic canvas ``(width, height)`` in pixels."""
        return self.cols * self.cell_px, self.rows * self.cell_px


def parse_env_text(text: str) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines; blank lines, ``#`` comments and junk are skipped."""
    values: dict[str, str] = {}
    for line in (raw.strip() for raw in text.splitlines()):
        if line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        value = value.strip()
        if value[:1] in {"'", '"'} and len(value) > 1 and value.endswith(value[0]):
            value = value[1:-1]
        values[key] = value
    return values


def load_env_file(path: str | Path, *, override_existing: bool = True) -> None:
    """Export the variables of env file ``path``; a missing file is skipped."""
    env_path = Path(path)
    if not env_path.is_file():
        return
    for key, value in parse_env_text(env_path.read_text(encoding="utf-8")).items():
        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(*, paths: Iterable[str] | None = None, override_existing: bool = True) -> None:
    """Load env files in order; with overriding on, later files win."""
    for path in DEFAULT_ENV_FILES if paths is None else paths:
        load_env_file(path, override_existing=override_existing)


def load_app_config() -> AppConfig:
    """Build :class:`AppConfig` from ``CONNECT_FOUR_*`` environment variables."""
    ai = os.getenv("CONNECT_FOUR_AI", "montecarlo").strip().lower()
    if ai not in AI_CHOICES:
        ai = "montecarlo"
    return AppConfig(
        rows=_positive_int("CONNECT_FOUR_ROWS", DEFAULT_ROWS),
        cols=_positive_int("CONNECT_FOUR_COLS", DEFAULT_COLS),
        cell_px=_positive_int("CONNECT_FOUR_CELL_PX", 100),
        reveal_base_ms=_non_negative_float("CONNECT_FOUR_REVEAL_BASE_MS", DEFAULT_REVEAL_BASE_MS),
        reveal_spread_ms=_non_negative_float("CONNECT_FOUR_REVEAL_SPREAD_MS", DEFAULT_REVEAL_SPREAD_MS),
        ai=ai,
        ai_playouts=_positive_int("CONNECT_FOUR_AI_PLAYOUTS", DEFAULT_PLAYOUTS),
        seed=_optional_int("CONNECT_FOUR_SEED"),
        debug_input=_flag("CONNECT_FOUR_DEBUG_INPUT"),
    )


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _positive_int(name: str, default: int) -> int:
    value = _optional_int(name)
    if value is None or value <= 0:
        return default
    return value


def _non_negative_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value >= 0.0 else default
