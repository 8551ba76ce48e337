"""
Colour palette and Rich styles for the wizard.
"""

from dataclasses import dataclass, field

from rich.style import Style

ACCENT = "#7aa2f7"
MUTED = "#6b7280"
TEXT = "#c0caf5"
TEXT_SOFT = "#a9b1d6"
GREEN = "#9ece6a"
SOFT = "#3b4261"
BACKGROUND = "#1f2335"
PANEL_BG = "#24283b"
ERROR = "#f7768e"
FLASH = "#c0caf5"

# Title art colours per line, accent blue into purple. Line 4 is the blank
# separator between the two words.
ART_COLORS = (
    "#7aa2f7",
    "#7aa2f7",
    "#7dcfff",
    "#7dcfff",
    PANEL_BG,
    "#bb9af7",
    "#bb9af7",
    "#9d7cd8",
    "#9d7cd8",
)

# Spark glow, brightest at the spark, fading toward the dim border colour.
GLOW_COLORS = (
    "#bb9af7",
    "#9d8ad4",
    "#7f7ab1",
    "#636a8e",
    "#4f5c78",
    "#3b4261",
)


def _on_panel(color: str, bold: bool = False) -> Style:
    return Style(color=color, bgcolor=PANEL_BG, bold=bold)


@dataclass(frozen=True)
class WizardStyles:
    """Pre-built styles so frames do not rebuild them."""

    frame: Style = Style(bgcolor=BACKGROUND)
    panel: Style = Style(bgcolor=PANEL_BG)
    border: Style = Style(color=SOFT, bgcolor=PANEL_BG)
    list_title: Style = _on_panel(TEXT_SOFT, bold=True)
    subheader: Style = _on_panel(MUTED)
    list_selected: Style = _on_panel(TEXT, bold=True)
    list_normal: Style = _on_panel(TEXT_SOFT)
    list_desc: Style = _on_panel(MUTED)
    marker: Style = _on_panel(ACCENT, bold=True)
    input_label: Style = _on_panel(MUTED)
    input_border: Style = _on_panel(ACCENT)
    input_text: Style = _on_panel(TEXT)
    placeholder: Style = _on_panel(MUTED)
    cursor: Style = Style(color=PANEL_BG, bgcolor=TEXT)
    error: Style = _on_panel(ERROR)
    help: Style = _on_panel(MUTED)
    help_key: Style = _on_panel(ACCENT)
    progress_full: Style = _on_panel(ACCENT)
    progress_empty: Style = _on_panel(SOFT)
    dim: Style = _on_panel(SOFT)
    flash: Style = _on_panel(FLASH, bold=True)
    art: tuple[Style, ...] = field(
        default_factory=lambda: tuple(_on_panel(color, bold=True) for color in ART_COLORS)
    )
    glow: tuple[Style, ...] = field(
        default_factory=lambda: tuple(
            _on_panel(color, bold=(level == 0)) for level, color in enumerate(GLOW_COLORS)
        )
    )


DEFAULT_STYLES = WizardStyles()
