"""Configuration system for pydataview using pydantic-settings.

Supports layered configuration:
1. Built-in defaults (lowest priority)
2. pyproject.toml [tool.pydataview] section (project-level)
3. ./pydataview.toml (project-level, explicit)
4. File named by PYDATAVIEW_CONFIG_FILE
5. Environment variables (highest priority)

Environment variables use PYDATAVIEW_ prefix with nested delimiter __.
Example: PYDATAVIEW_URL__SORT_PARAMETER_NAME, PYDATAVIEW_SORTABLE__MULTI_SORT
"""

from __future__ import annotations

import os
import sys
import warnings

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


ParameterPlacement = Literal["path", "query"]


def _find_config_files() -> list[Path]:
    """Find all configuration files in order of precedence (lowest first)."""
    files = []

    pyproject = Path("pyproject.toml")
    if pyproject.exists():
        files.append(pyproject)

    explicit = Path("pydataview.toml")
    if explicit.exists():
        files.append(explicit)

    env_config = os.environ.get("PYDATAVIEW_CONFIG_FILE")
    if env_config:
        env_path = Path(env_config)
        if env_path.exists():
            files.append(env_path)

    return files


def _load_toml_config() -> dict[str, Any]:
    """Load and merge all TOML configuration files."""
    merged: dict[str, Any] = {}

    for config_file in _find_config_files():
        try:
            data = tomllib.loads(config_file.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError) as exc:
            # Logging is configured from these settings, so it cannot be used here.
            warnings.warn(f"Ignoring unreadable config file {config_file}: {exc}", stacklevel=2)
            continue

        if config_file.name == "pyproject.toml":
            data = data.get("tool", {}).get("pydataview", {})

        merged = _deep_merge(merged, data)

    return merged


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class UrlSettings(BaseSettings):
    """Names and placement of pagination and sorting URL parameters.

    Environment prefix: PYDATAVIEW_URL__
    Example: PYDATAVIEW_URL__PAGE_SIZE_PARAMETER_NAME=per-page
    """

    model_config = SettingsConfigDict(
        env_prefix="PYDATAVIEW_URL__",
        extra="ignore",
    )

    page_parameter_name: str = "page"
    previous_page_parameter_name: str = "prev-page"
    page_size_parameter_name: str = "pagesize"
    sort_parameter_name: str = "sort"
    page_parameter_type: ParameterPlacement = "query"
    previous_page_parameter_type: ParameterPlacement = "query"
    page_size_parameter_type: ParameterPlacement = "query"
    sort_parameter_type: ParameterPlacement = "query"


class SortableSettings(BaseSettings):
    """Decoration of sortable column headers.

    Environment prefix: PYDATAVIEW_SORTABLE__
    Example: PYDATAVIEW_SORTABLE__MULTI_SORT=true
    """

    model_config = SettingsConfigDict(
        env_prefix="PYDATAVIEW_SORTABLE__",
        extra="ignore",
    )

    header_class: str | None = None
    header_prepend: str = ""
    header_append: str = ""
    header_asc_class: str | None = None
    header_asc_prepend: str = ""
    header_asc_append: str = ""
    header_desc_class: str | None = None
    header_desc_prepend: str = ""
    header_desc_append: str = ""
    link_asc_class: str | None = "asc"
    link_desc_class: str | None = "desc"
    multi_sort: bool = Field(
        default=False,
        description="Keep other sorted columns when toggling one column's order",
    )


class GridSettings(BaseSettings):
    """Grid rendering defaults.

    Environment prefix: PYDATAVIEW_GRID__
    Example: PYDATAVIEW_GRID__EMPTY_TEXT="Nothing here"
    """

    model_config = SettingsConfigDict(
        env_prefix="PYDATAVIEW_GRID__",
        extra="ignore",
    )

    table_class: str | None = "table"
    empty_text: str = "No results found."
    empty_cell: str = "&nbsp;"
    translation_category: str = "pydataview"
    checkbox_name: str = "checkbox-selection"
    checkbox_all_name: str = "checkbox-selection-all"
    radio_name: str = "radio-selection"
    date_time_format: str = "%Y-%m-%d %H:%M:%S"


class LogSettings(BaseSettings):
    """Logging settings.

    Environment prefix: PYDATAVIEW_LOG__
    Example: PYDATAVIEW_LOG__LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="PYDATAVIEW_LOG__",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(name)s - %(levelname)s - %(message)s"


_SECTIONS: list[tuple[str, str, str]] = [
    ("URL parameters", "url", "URL"),
    ("Sortable headers", "sortable", "SORTABLE"),
    ("Grid", "grid", "GRID"),
    ("Logging", "log", "LOG"),
]


class DataViewSettings(BaseSettings):
    """Main settings aggregating all configuration sections.

    Environment prefix: PYDATAVIEW__

    Configuration sources (in order of precedence):
    1. Built-in defaults
    2. pyproject.toml [tool.pydataview] section
    3. ./pydataview.toml
    4. PYDATAVIEW_CONFIG_FILE
    5. Environment variables (highest priority)
    """

    model_config = SettingsConfigDict(
        env_prefix="PYDATAVIEW__",
        env_nested_delimiter="__",
        extra="ignore",
    )

    url: UrlSettings = Field(default_factory=UrlSettings)
    sortable: SortableSettings = Field(default_factory=SortableSettings)
    grid: GridSettings = Field(default_factory=GridSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    def __init__(self, **data: Any) -> None:
        toml_config = _load_toml_config()
        super().__init__(**_deep_merge(toml_config, data))

    def to_toml(self) -> str:
        """Export settings as TOML string."""
        lines = ["# pydataview configuration", "# Generated by: pydataview config --toml", ""]
        all_data = self.model_dump()
        for _, section_name, _ in _SECTIONS:
            lines.append(f"[{section_name}]")
            for field_name, field_value in all_data[section_name].items():
                if field_value is None:
                    continue
                if isinstance(field_value, bool):
                    value_str = "true" if field_value else "false"
                elif isinstance(field_value, str):
                    value_str = '"' + field_value.replace("\\", "\\\\").replace('"', '\\"') + '"'
                else:
                    value_str = str(field_value)
                lines.append(f"{field_name} = {value_str}")
            lines.append("")
        return "\n".join(lines)

    def to_env(self) -> str:
        """Export settings as shell environment variable assignments."""
        lines = ["# pydataview environment variables", ""]
        all_data = self.model_dump()
        for _, section_name, env_prefix in _SECTIONS:
            for field_name, field_value in all_data[section_name].items():
                if field_value is None:
                    continue
                if isinstance(field_value, bool):
                    value_str = "true" if field_value else "false"
                else:
                    value_str = str(field_value)
                lines.append(f'export PYDATAVIEW_{env_prefix}__{field_name.upper()}="{value_str}"')
        return "\n".join(lines)

    def show(self) -> str:
        """Format settings as a readable table."""
        lines = ["pydataview configuration", "=" * 60]
        all_data = self.model_dump()
        for display_name, section_name, _ in _SECTIONS:
            lines.append(f"\n{display_name}")
            lines.append("-" * 40)
            for field_name, field_value in all_data[section_name].items():
                value_str = str(field_value)
                if len(value_str) > 50:
                    value_str = value_str[:47] + "..."
                lines.append(f"  {field_name:30} = {value_str}")
        return "\n".join(lines)


def get_config_sources() -> list[Path]:
    """Return the configuration files that contribute to the settings."""
    return _find_config_files()


@lru_cache(maxsize=1)
def get_settings() -> DataViewSettings:
    """Get the global settings instance (cached).

    Call clear_settings() to reload configuration.
    """
    return DataViewSettings()


def clear_settings() -> None:
    """Clear the cached settings to force reload."""
    get_settings.cache_clear()


def reload_settings() -> DataViewSettings:
    """Reload settings from all sources."""
    clear_settings()
    return get_settings()
