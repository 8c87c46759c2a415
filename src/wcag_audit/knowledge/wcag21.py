"""Built-in WCAG 2.1 A/AA criteria catalog."""

from wcag_audit.core import rules
from wcag_audit.models.criterion import ConformanceLevel, Criterion

A = ConformanceLevel.A
AA = ConformanceLevel.AA


def get_wcag21_criteria() -> list[Criterion]:
    """Get the built-in criteria in registration (and report) order.

    Returns:
        List of Criterion definitions
    """
    return [
        Criterion(
            id="1.1.1",
            name="Non-text Content",
            level=A,
            description="All non-text content has a text alternative",
            rule=rules.non_text_content,
        ),
        Criterion(
            id="1.3.1",
            name="Info and Relationships",
            level=A,
            description=(
                "Information, structure, and relationships can be programmatically determined"
            ),
            rule=rules.info_and_relationships,
        ),
        Criterion(
            id="1.4.1",
            name="Use of Color",
            level=A,
            description=(
                "Color is not used as the only visual means of conveying information"
            ),
            rule=rules.use_of_color,
        ),
        Criterion(
            id="1.4.3",
            name="Contrast (Minimum)",
            level=AA,
            description="Text has sufficient contrast ratio",
            rule=rules.contrast_minimum,
        ),
        Criterion(
            id="2.1.1",
            name="Keyboard",
            level=A,
            description="All functionality is available from a keyboard",
            rule=rules.keyboard,
        ),
        Criterion(
            id="2.4.1",
            name="Bypass Blocks",
            level=A,
            description="A mechanism is available to bypass repeated blocks of content",
            rule=rules.bypass_blocks,
        ),
        Criterion(
            id="2.4.2",
            name="Page Titled",
            level=A,
            description="Web pages have titles that describe topic or purpose",
            rule=rules.page_titled,
        ),
        Criterion(
            id="2.4.3",
            name="Focus Order",
            level=A,
            description=(
                "If a Web page can be navigated sequentially, focusable components "
                "receive focus in an order that preserves meaning and operability"
            ),
            rule=rules.focus_order,
        ),
        Criterion(
            id="2.4.4",
            name="Link Purpose (In Context)",
            level=A,
            description=(
                "The purpose of each link can be determined from the link text alone "
                "or from the link text together with its programmatically determined "
                "link context"
            ),
            rule=rules.link_purpose,
        ),
        Criterion(
            id="2.4.6",
            name="Headings and Labels",
            level=AA,
            description="Headings and labels describe topic or purpose",
            rule=rules.headings_and_labels,
        ),
        Criterion(
            id="2.4.7",
            name="Focus Visible",
            level=AA,
            description=(
                "Any keyboard operable user interface has a mode of operation where "
                "the keyboard focus indicator is visible"
            ),
            rule=rules.focus_visible,
        ),
        Criterion(
            id="3.2.1",
            name="On Focus",
            level=A,
            description=(
                "When any component receives focus, it does not initiate a change of context"
            ),
            rule=rules.on_focus,
        ),
        Criterion(
            id="3.2.2",
            name="On Input",
            level=A,
            description=(
                "Changing the setting of any user interface component does not "
                "automatically cause a change of context unless the user has been "
                "advised of the behavior before using the component"
            ),
            rule=rules.on_input,
        ),
        Criterion(
            id="4.1.1",
            name="Parsing",
            level=A,
            description="Content can be parsed by user agents, including assistive technologies",
            rule=rules.parsing,
        ),
        Criterion(
            id="4.1.2",
            name="Name, Role, Value",
            level=A,
            description=(
                "For all user interface components, the name and role can be "
                "programmatically determined"
            ),
            rule=rules.name_role_value,
        ),
    ]
