"""External accessibility scanners."""

from wcag_audit.scanners.base import (
    CommandOutput,
    CommandRunner,
    CommandScanner,
    Scanner,
    run_command,
)
from wcag_audit.scanners.axe import AxeScanner
from wcag_audit.scanners.pa11y import Pa11yScanner
from wcag_audit.utils.config import ScannersConfig

__all__ = [
    "CommandOutput",
    "CommandRunner",
    "CommandScanner",
    "Scanner",
    "run_command",
    "AxeScanner",
    "Pa11yScanner",
    "build_scanners",
]


def build_scanners(config: ScannersConfig, runner: CommandRunner | None = None) -> list[Scanner]:
    """Build the enabled scanners from configuration.

    Args:
        config: Scanner configuration
        runner: Optional command runner shared by all scanners

    Returns:
        Enabled scanners, axe-core first
    """
    scanners: list[Scanner] = []
    if config.axe.enabled:
        scanners.append(AxeScanner(config.axe.command, config.axe.timeout, runner))
    if config.pa11y.enabled:
        scanners.append(Pa11yScanner(config.pa11y.command, config.pa11y.timeout, runner))
    return scanners
