"""Configuration file support for wcag-audit."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

DEFAULT_HTML_FILES = [
    "templates/landing/map2.html",
    "templates/base.html",
    "templates/navbar.html",
    "templates/mapnavbar.html",
    "templates/map2navbar.html",
    "templates/vercel.html",
    "templates/footer.html",
]

DEFAULT_CSS_FILES = [
    "static/css/atlas.css",
    "static/css/accessibility.css",
    "static/css/map.css",
    "static/css/main.css",
]

DEFAULT_JS_FILES = [
    "static/js/accessibility.js",
    "static/js/atlas_api.js",
    "static/js/navpanel.js",
    "static/js/navpanelID.js",
]


class TargetsConfig(BaseModel):
    """Which documents to audit."""

    base_dir: str = Field(default=".", description="Directory the file lists are relative to")
    html_files: list[str] = Field(default_factory=lambda: list(DEFAULT_HTML_FILES))
    css_files: list[str] = Field(default_factory=lambda: list(DEFAULT_CSS_FILES))
    js_files: list[str] = Field(default_factory=lambda: list(DEFAULT_JS_FILES))
    include_assets: bool = Field(
        default=False,
        description="Also run the built-in criteria over CSS and JS files",
    )

    def paths(self) -> list[str]:
        """Ordered list of document paths to audit."""
        paths = list(self.html_files)
        if self.include_assets:
            paths.extend(self.css_files)
            paths.extend(self.js_files)
        return paths


class OutputConfig(BaseModel):
    """Output configuration."""

    directory: str = Field(
        default="./comprehensive_accessibility_results",
        description="Directory the artifacts are written to",
    )
    json_filename: str = Field(default="comprehensive_accessibility_results.json")
    report_filename: str = Field(default="comprehensive_accessibility_report.html")
    markdown_filename: str = Field(default="comprehensive_accessibility_report.md")
    formats: list[str] = Field(
        default_factory=lambda: ["json", "html"],
        description="Artifacts to write (json, html, markdown)",
    )


class ToolConfig(BaseModel):
    """Settings for one external scanner."""

    enabled: bool = Field(default=True, description="Run this scanner")
    command: str | None = Field(default=None, description="Executable to invoke")
    timeout: float = Field(default=120.0, description="Per-document timeout in seconds")


class ScannersConfig(BaseModel):
    """External scanner configuration."""

    axe: ToolConfig = Field(default_factory=lambda: ToolConfig(command="axe"))
    pa11y: ToolConfig = Field(default_factory=lambda: ToolConfig(command="pa11y"))
    time_budget: float | None = Field(
        default=None,
        description="Stop requesting documents after this many seconds",
    )


class WcagAuditConfig(BaseModel):
    """Main configuration for wcag-audit."""

    targets: TargetsConfig = Field(default_factory=TargetsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    scanners: ScannersConfig = Field(default_factory=ScannersConfig)


def get_config_paths() -> list[Path]:
    """Get possible configuration file paths, in search order.

    Returns:
        List of paths to check for configuration files
    """
    cwd = Path.cwd()
    home = Path.home()
    paths = [
        cwd / ".wcag-audit.yaml",
        cwd / ".wcag-audit.yml",
        cwd / "wcag-audit.yaml",
        home / ".wcag-audit.yaml",
        home / ".config" / "wcag-audit" / "config.yaml",
    ]

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        paths.append(Path(xdg_config) / "wcag-audit" / "config.yaml")

    return paths


def load_config(config_path: Path | str | None = None) -> WcagAuditConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValueError: If the file is not valid configuration
    """
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            return _load_config_file(path)
        raise FileNotFoundError(f"Config file not found: {config_path}")

    for path in get_config_paths():
        if path.exists():
            return _load_config_file(path)

    return WcagAuditConfig()


def _load_config_file(path: Path) -> WcagAuditConfig:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}") from e

    if data is None:
        return WcagAuditConfig()
    try:
        return WcagAuditConfig.model_validate(data)
    except Exception as e:
        raise ValueError(f"Failed to load config file: {e}") from e


def save_config(config: WcagAuditConfig, config_path: Path | str | None = None) -> Path:
    """Save configuration to file.

    Args:
        config: Configuration to save
        config_path: Path to save to. Defaults to ./.wcag-audit.yaml

    Returns:
        Path where config was saved
    """
    path = Path(config_path) if config_path is not None else Path.cwd() / ".wcag-audit.yaml"
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json", exclude_defaults=True)
    path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False), encoding="utf-8")
    return path


def get_default_config() -> WcagAuditConfig:
    """Get the default configuration."""
    return WcagAuditConfig()


_config: WcagAuditConfig | None = None


def get_config() -> WcagAuditConfig:
    """Get the global configuration instance, loading it on first call."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: WcagAuditConfig | None) -> None:
    """Set (or with None, reset) the global configuration instance."""
    global _config
    _config = config
