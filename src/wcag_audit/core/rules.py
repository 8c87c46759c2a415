"""Evaluation rules for the built-in WCAG criteria.

Each rule is a pure function from raw document content to a list of
findings. Rules inspect the text with patterns rather than a DOM, so they
are heuristics: matching is case-sensitive and purely textual. They never
raise on malformed or empty input.
"""

from __future__ import annotations

import re

from wcag_audit.models.criterion import Finding, Severity

IMG_TAG = re.compile(r"<img[^>]*>")
HEADING = re.compile(r"<h[1-6][^>]*>.*?</h[1-6]>")
HEADING_LEVEL = re.compile(r"<h([1-6])")
LINK = re.compile(r"<a[^>]*>.*?</a>")
INPUT_TAG = re.compile(r"<input[^>]*>")
BUTTON = re.compile(r"<button[^>]*>.*?</button>")
ANY_TAG = re.compile(r"<[^>]*>")
OPEN_TAG = re.compile(r"<[^/][^>]*>")
CLOSE_TAG = re.compile(r"</[^>]*>")

NON_DESCRIPTIVE_LINK_TEXT = frozenset({"", "click here", "here", "more"})
MIN_HEADING_TEXT = 3


def _text_of(markup: str) -> str:
    return ANY_TAG.sub("", markup).strip()


def _matches(pattern: re.Pattern[str], content: str) -> list[str]:
    return [m.group(0) for m in pattern.finditer(content)]


def non_text_content(content: str) -> list[Finding]:
    """1.1.1: every ``<img>`` needs a non-empty ``alt``."""
    findings = []
    for index, img in enumerate(_matches(IMG_TAG, content), start=1):
        if "alt=" not in img or 'alt=""' in img:
            findings.append(
                Finding(
                    criterion="1.1.1",
                    severity=Severity.CRITICAL,
                    message=f"Image {index} missing alt attribute",
                    element=img,
                    recommendation="Add descriptive alt text for all images",
                )
            )
    return findings


def info_and_relationships(content: str) -> list[Finding]:
    """1.3.1: heading levels must not skip; generic divs need roles.

    Only forward skips are flagged; going back up (h3 -> h1) is allowed.
    """
    findings = []

    current_level = 0
    for heading in _matches(HEADING, content):
        level = int(HEADING_LEVEL.match(heading).group(1))
        if current_level != 0 and level > current_level + 1:
            findings.append(
                Finding(
                    criterion="1.3.1",
                    severity=Severity.WARNING,
                    message=f"Heading level skipped from h{current_level} to h{level}",
                    element=heading,
                    recommendation="Maintain proper heading hierarchy (h1 → h2 → h3)",
                )
            )
        current_level = level

    # Once per document, not per div
    if "<div" in content and "role=" not in content:
        findings.append(
            Finding(
                criterion="1.3.1",
                severity=Severity.LOW,
                message="Generic divs without semantic roles",
                recommendation="Use semantic HTML elements or add ARIA roles",
            )
        )

    return findings


def use_of_color(content: str) -> list[Finding]:
    """1.4.1: inline color declarations need a manual contrast check."""
    if "color:" in content and "background-color:" in content:
        return [
            Finding(
                criterion="1.4.1",
                severity=Severity.WARNING,
                message="Color combinations detected - ensure sufficient contrast",
                recommendation="Verify color contrast ratios meet WCAG requirements",
            )
        ]
    return []


def contrast_minimum(content: str) -> list[Finding]:
    """1.4.3: flags hex/rgb color definitions. Not a real contrast computation."""
    if "color: #" in content or "color: rgb" in content:
        return [
            Finding(
                criterion="1.4.3",
                severity=Severity.WARNING,
                message="Color definitions detected - verify contrast ratios",
                recommendation=(
                    "Ensure text contrast meets 4.5:1 ratio for normal text, 3:1 for large text"
                ),
            )
        ]
    return []


def keyboard(content: str) -> list[Finding]:
    """2.1.1: click handlers need key handlers; inputs need a type."""
    findings = []

    if "onclick=" in content and "onkeydown=" not in content and "onkeyup=" not in content:
        findings.append(
            Finding(
                criterion="2.1.1",
                severity=Severity.CRITICAL,
                message="Elements with onclick but no keyboard event handlers",
                recommendation=(
                    "Add keyboard event handlers or use addEventListener for accessibility"
                ),
            )
        )

    if "<input" in content and "type=" not in content:
        findings.append(
            Finding(
                criterion="2.1.1",
                severity=Severity.WARNING,
                message="Input elements without type attribute",
                recommendation="Specify input type for proper keyboard behavior",
            )
        )

    return findings


def bypass_blocks(content: str) -> list[Finding]:
    """2.4.1: some skip-navigation marker must appear somewhere."""
    if not content:
        return []
    if "skip" not in content:
        return [
            Finding(
                criterion="2.4.1",
                severity=Severity.WARNING,
                message="No skip navigation mechanism detected",
                recommendation="Add skip links for main content and navigation",
            )
        ]
    return []


def page_titled(content: str) -> list[Finding]:
    """2.4.2: a non-empty ``<title>`` is required."""
    if not content:
        return []
    if "<title>" not in content or "<title></title>" in content:
        return [
            Finding(
                criterion="2.4.2",
                severity=Severity.CRITICAL,
                message="Missing or empty page title",
                recommendation="Add descriptive page title",
            )
        ]
    return []


def focus_order(content: str) -> list[Finding]:
    """2.4.3: any tabindex override is flagged for review."""
    if "tabindex=" in content:
        return [
            Finding(
                criterion="2.4.3",
                severity=Severity.WARNING,
                message="tabindex attributes detected - verify logical focus order",
                recommendation="Ensure tabindex values maintain logical navigation flow",
            )
        ]
    return []


def link_purpose(content: str) -> list[Finding]:
    """2.4.4: link text must not be empty or a stock phrase."""
    findings = []
    for index, link in enumerate(_matches(LINK, content), start=1):
        text = _text_of(link)
        if text in NON_DESCRIPTIVE_LINK_TEXT:
            findings.append(
                Finding(
                    criterion="2.4.4",
                    severity=Severity.WARNING,
                    message=f'Link {index} has non-descriptive text: "{text}"',
                    element=link,
                    recommendation="Use descriptive link text that explains the destination",
                )
            )
    return findings


def headings_and_labels(content: str) -> list[Finding]:
    """2.4.6: headings need at least a few characters of text."""
    findings = []
    for index, heading in enumerate(_matches(HEADING, content), start=1):
        text = _text_of(heading)
        if len(text) < MIN_HEADING_TEXT:
            findings.append(
                Finding(
                    criterion="2.4.6",
                    severity=Severity.WARNING,
                    message=f'Heading {index} has insufficient text: "{text}"',
                    element=heading,
                    recommendation="Provide descriptive heading text",
                )
            )
    return findings


def focus_visible(content: str) -> list[Finding]:
    """2.4.7: outline removed in a focus style."""
    if ":focus" in content and "outline: none" in content:
        return [
            Finding(
                criterion="2.4.7",
                severity=Severity.CRITICAL,
                message="Focus outline removed without alternative indicator",
                recommendation="Provide visible focus indicators for all interactive elements",
            )
        ]
    return []


def on_focus(content: str) -> list[Finding]:
    """3.2.1: focus handlers that submit or navigate."""
    if "onfocus=" in content and ("submit" in content or "location" in content):
        return [
            Finding(
                criterion="3.2.1",
                severity=Severity.WARNING,
                message="Focus-triggered context changes detected",
                recommendation="Avoid automatic form submission or navigation on focus",
            )
        ]
    return []


def on_input(content: str) -> list[Finding]:
    """3.2.2: change handlers that submit."""
    if "onchange=" in content and "submit" in content:
        return [
            Finding(
                criterion="3.2.2",
                severity=Severity.WARNING,
                message="Auto-submit on input change detected",
                recommendation="Provide user control over form submission",
            )
        ]
    return []


def parsing(content: str) -> list[Finding]:
    """4.1.1: opening and closing tag counts must match.

    Void and self-closing elements count as opening tags.
    """
    open_tags = len(OPEN_TAG.findall(content))
    close_tags = len(CLOSE_TAG.findall(content))
    if open_tags != close_tags:
        return [
            Finding(
                criterion="4.1.1",
                severity=Severity.CRITICAL,
                message=f"Mismatched tags: {open_tags} open, {close_tags} closed",
                recommendation="Ensure all HTML tags are properly closed",
            )
        ]
    return []


def name_role_value(content: str) -> list[Finding]:
    """4.1.2: inputs and buttons need an accessible name."""
    findings = []

    for index, tag in enumerate(_matches(INPUT_TAG, content), start=1):
        if "id=" not in tag and "aria-label=" not in tag and "title=" not in tag:
            findings.append(
                Finding(
                    criterion="4.1.2",
                    severity=Severity.WARNING,
                    message=f"Input {index} missing accessible name",
                    element=tag,
                    recommendation="Add id, aria-label, or title attribute",
                )
            )

    for index, button in enumerate(_matches(BUTTON, content), start=1):
        if _text_of(button) == "" and "aria-label=" not in button and "title=" not in button:
            findings.append(
                Finding(
                    criterion="4.1.2",
                    severity=Severity.CRITICAL,
                    message=f"Button {index} missing accessible name",
                    element=button,
                    recommendation="Add text content, aria-label, or title attribute",
                )
            )

    return findings
