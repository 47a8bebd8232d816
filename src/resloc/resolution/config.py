"""Configuration for resource loaders.

Settings are merged with the following priority (highest to lowest):
1. Runtime Parameters (passed directly to ``load_config``)
2. Environment Variables (prefixed with RESLOC_)
3. Project Config ([tool.resloc] in pyproject.toml)
4. Defaults (hardcoded fallbacks)
"""

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_PREFIX = "classpath:"
DEFAULT_URL_SCHEMES = ["http", "https", "ftp", "file", "data"]
DEFAULT_URL_TIMEOUT = 10.0


class LoaderConfig(BaseModel):
    """Configuration model for :class:`~resloc.resolution.loader.ResourceLoader`."""

    prefix: str = Field(
        default=DEFAULT_PREFIX,
        description="Pseudo-scheme marking explicit classpath locations",
    )

    url_schemes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_URL_SCHEMES),
        description="URL schemes recognised as absolute URLs",
    )

    search_path: list[str] = Field(
        default_factory=list,
        description=(
            "Directories searched for classpath resources; empty means "
            "the ambient or sys.path default"
        ),
    )

    url_timeout: float = Field(
        default=DEFAULT_URL_TIMEOUT,
        gt=0,
        description="Seconds URL resources wait for a remote connection",
    )

    model_config = {
        "extra": "forbid",
    }

    @field_validator("prefix")
    @classmethod
    def _prefix_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("prefix must not be empty")
        return value

    @field_validator("url_schemes")
    @classmethod
    def _lower_schemes(cls, value: list[str]) -> list[str]:
        return [scheme.strip().lower() for scheme in value if scheme.strip()]


def _load_from_pyproject_toml() -> dict[str, Any]:
    """Load configuration from [tool.resloc] section in pyproject.toml.

    Returns:
        Dictionary with config values, or empty dict if not found.
    """
    current_dir = Path.cwd()
    for path in [current_dir] + list(current_dir.parents):
        pyproject_path = path / "pyproject.toml"
        if pyproject_path.exists():
            try:
                with open(pyproject_path, "rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError):
                continue
            if "tool" in data and "resloc" in data["tool"]:
                result: dict[str, Any] = dict(data["tool"]["resloc"])
                return result

    return {}


def _load_from_env() -> dict[str, Any]:
    """Load configuration from environment variables (prefixed with RESLOC_).

    Returns:
        Dictionary with config values from environment.
    """
    config: dict[str, Any] = {}

    prefix = os.getenv("RESLOC_PREFIX")
    if prefix is not None:
        config["prefix"] = prefix

    schemes = os.getenv("RESLOC_URL_SCHEMES")
    if schemes is not None:
        config["url_schemes"] = schemes.split(",")

    search_path = os.getenv("RESLOC_SEARCH_PATH")
    if search_path is not None:
        config["search_path"] = [p for p in search_path.split(os.pathsep) if p]

    url_timeout = os.getenv("RESLOC_URL_TIMEOUT")
    if url_timeout is not None:
        config["url_timeout"] = url_timeout

    return config


def load_config(
    prefix: Optional[str] = None,
    url_schemes: Optional[list[str]] = None,
    search_path: Optional[list[str]] = None,
    url_timeout: Optional[float] = None,
    **kwargs: Any,
) -> LoaderConfig:
    """Load configuration with hierarchical priority.

    Args:
        prefix: Classpath pseudo-scheme.
        url_schemes: Schemes treated as URLs.
        search_path: Directories for classpath lookup.
        url_timeout: Connection timeout for URL resources, in seconds.
        **kwargs: Additional configuration parameters.

    Returns:
        LoaderConfig instance with merged configuration.
    """
    runtime_config: dict[str, Any] = {}
    if prefix is not None:
        runtime_config["prefix"] = prefix
    if url_schemes is not None:
        runtime_config["url_schemes"] = url_schemes
    if search_path is not None:
        runtime_config["search_path"] = search_path
    if url_timeout is not None:
        runtime_config["url_timeout"] = url_timeout
    runtime_config.update(kwargs)

    merged_config = LoaderConfig().model_dump()
    merged_config.update(_load_from_pyproject_toml())
    merged_config.update(_load_from_env())
    merged_config.update(runtime_config)

    return LoaderConfig(**merged_config)
