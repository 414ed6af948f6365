"""
Configuration management for beacon-mapping.

Provides a typed pydantic model and YAML loader with sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Literal, Any, Dict

from pydantic import BaseModel, Field, ValidationError
import yaml


# -----------------------
# Typed config structures
# -----------------------


class PathsConfig(BaseModel):
    input_file: Optional[str] = Field(default=None, description="Scanner report file to assemble")


class MatchingConfig(BaseModel):
    min_overlap: int = Field(
        default=12,
        ge=2,
        description="Minimum number of shared beacons before a correspondence is accepted",
    )
    # 'all' searches the 48 permutation/sign operators, 'proper' only the 24 rotations
    orientations: Literal["all", "proper"] = Field(default="all")


class AssemblyConfig(BaseModel):
    max_retries: int = Field(
        default=1000,
        ge=0,
        description="Failed alignment attempts tolerated before assembly gives up",
    )


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    file: Optional[str] = Field(default=None)


class AppConfig(BaseModel):
    paths: PathsConfig = Field(default_factory=PathsConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    assembly: AssemblyConfig = Field(default_factory=AssemblyConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# -----------------------
# Loader
# -----------------------


def _project_root() -> Path:
    """
    Resolve the repository root directory.

    File is at: repo_root/src/beacon_mapping/utils/config.py
    parents sequence:
      0 -> .../src/beacon_mapping/utils
      1 -> .../src/beacon_mapping
      2 -> .../src
      3 -> repo_root
    """
    return Path(__file__).resolve().parents[3]


def load_config(path: Optional[str | Path] = None, *, allow_missing: bool = True) -> AppConfig:
    """
    Load configuration from YAML into a typed AppConfig.

    Search order when path is None:
    1) repo_root/config/default.yaml
    2) if missing and allow_missing=True: return default AppConfig()

    Relative paths that do not exist from the working directory are
    resolved against the repository root.

    Args:
        path: Explicit YAML file path.
        allow_missing: If True, returns defaults when file missing; otherwise raises.

    Returns:
        AppConfig instance
    """
    cfg_path: Path
    if path is None:
        cfg_path = _project_root() / "config" / "default.yaml"
    else:
        cfg_path = Path(path)
        if not cfg_path.is_absolute() and not cfg_path.exists():
            cfg_path = _project_root() / cfg_path

    if not cfg_path.exists():
        if allow_missing:
            return AppConfig()
        raise FileNotFoundError(f"Config file not found: {cfg_path}")

    with cfg_path.open("r", encoding="utf-8") as f:
        raw: Dict[str, Any] = yaml.safe_load(f) or {}

    try:
        return AppConfig.model_validate(raw)
    except ValidationError as e:
        # Re-raise with context to help users fix the YAML
        raise ValueError(f"Invalid configuration in {cfg_path}: {e}")
