"""
Basic settings, preferences and logging configuration for the spray calculator.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from spraycalc_app.config.labels import Language

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = Language.POLISH


def _get_resource_root() -> Path:

    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return Path(sys._MEIPASS)
    return Path(__file__).resolve().parents[2]


def _get_user_data_dir(resource_root: Path) -> Path:

    if getattr(sys, "frozen", False):
        exe_path = Path(getattr(sys, "executable", resource_root))
        return exe_path.parent / "spraycalc_app_data"
    return resource_root / "spraycalc_app_data"


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    data_dir: Path
    db_path: Path
    preferences_path: Path

    @classmethod
    def default(cls) -> "Settings":
        resource_root = _get_resource_root()
        return cls.for_directory(_get_user_data_dir(resource_root), project_root=resource_root)

    @classmethod
    def for_directory(cls, data_dir: Path, project_root: Path | None = None) -> "Settings":
        """Settings with every writable file placed under data_dir."""
        data_dir = Path(data_dir)
        data_dir.mkdir(parents=True, exist_ok=True)
        return cls(
            project_root=project_root or data_dir,
            data_dir=data_dir,
            db_path=data_dir / "spraycalc.db",
            preferences_path=data_dir / "preferences.json",
        )


def init_logging(settings: Settings, level: int = logging.INFO) -> None:
    """Configure basic logging to console and a log file in the data directory."""
    log_file = settings.data_dir / "spraycalc.log"

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )

    logging.getLogger(__name__).info("Logging initialized. DB at %s", settings.db_path)


def _load_preferences(settings: Settings) -> dict:
    path = settings.preferences_path
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}
    except (json.JSONDecodeError, OSError):
        logger.warning("Ignoring unreadable preferences file %s", path)
        return {}


def load_language(settings: Settings) -> Language:
    """Selected display language; Polish when nothing valid is stored."""
    code = _load_preferences(settings).get("language")
    try:
        return Language(code)
    except ValueError:
        return DEFAULT_LANGUAGE


def save_language(settings: Settings, language: Language) -> None:
    """Persist the selected display language, keeping other preferences."""
    prefs = _load_preferences(settings)
    prefs["language"] = language.value
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    with open(settings.preferences_path, "w", encoding="utf-8") as f:
        json.dump(prefs, f, indent=2)
