"""
Frame rendering for the wizard.

Everything here is a pure function of the wizard state, the animation state
and the terminal size. Nothing in this module mutates either state.
"""

from rich.text import Text

from projinit.wizard.animation import (
    TITLE_ART,
    AnimationState,
    art_width,
    reveal_total_ticks,
    revealed_columns,
    spark_position,
)
from projinit.wizard.machine import KeyMap
from projinit.wizard.selection import SelectionList
from projinit.wizard.state import (
    DEFAULT_HEIGHT,
    DEFAULT_PANEL_HEIGHT,
    DEFAULT_PANEL_WIDTH,
    DEFAULT_WIDTH,
    PANEL_CHROME_HEIGHT,
    PANEL_CHROME_WIDTH,
    Stage,
    WizardState,
    stage_progress,
    stage_subtitle,
    stage_title,
    step_label,
)
from projinit.wizard.styles import DEFAULT_STYLES, WizardStyles

PROGRESS_WIDTH = 20
HELP_SEPARATOR = "  •  "
BINDING_SEPARATOR = " • "


def fit(text: Text, width: int) -> Text:
    """Crop or pad a single line to exactly ``width`` cells."""
    fitted = text.copy()
    fitted.truncate(max(0, width), overflow="crop", pad=True)
    return fitted


# ---------------------------------------------------------------------------
# Title block
# ---------------------------------------------------------------------------


def render_animated_border(width: int, frame: int, styles: WizardStyles = DEFAULT_STYLES) -> Text:
    """One border line with a spark travelling along it."""
    line = Text(style=styles.panel)
    if width < 2:
        return line

    spark = spark_position(frame, width)
    for i in range(width):
        if i == 0:
            ch = "╾"
        elif i == width - 1:
            ch = "╼"
        else:
            ch = "═"
        distance = abs(spark - i)
        if distance < len(styles.glow):
            line.append(ch, styles.glow[distance])
        else:
            line.append(ch, styles.dim)
    return line


def render_title_block(
    anim: AnimationState,
    width: int,
    styles: WizardStyles = DEFAULT_STYLES,
    reveal_columns: int = 3,
) -> list[Text]:
    """Border, title art with the reveal applied, border."""
    frame = anim.title_frame
    art_w = art_width()
    revealed = revealed_columns(frame, reveal_columns)
    revealing = frame < reveal_total_ticks(reveal_columns)
    left_pad = max(0, (width - art_w) // 2)

    lines = [render_animated_border(width, frame, styles)]
    for line_index, art_line in enumerate(TITLE_ART):
        row = Text(" " * left_pad, style=styles.panel)
        normal = styles.art[line_index]
        for col, ch in enumerate(art_line.ljust(art_w)):
            if col >= revealed:
                row.append(" ")
            elif revealing and col >= revealed - reveal_columns:
                row.append(ch, styles.flash)
            else:
                row.append(ch, normal)
        lines.append(fit(row, width))
    lines.append(render_animated_border(width, frame + width // 2, styles))
    return lines


# ---------------------------------------------------------------------------
# Stage widgets
# ---------------------------------------------------------------------------


def render_selection_list(
    selection: SelectionList, width: int, height: int, styles: WizardStyles = DEFAULT_STYLES
) -> list[Text]:
    """Label and description rows for the page holding the highlighted item."""
    rows: list[Text] = []
    for index, item in selection.visible_items():
        is_selected = index == selection.index
        row = Text(style=styles.panel)
        if is_selected:
            row.append("› ", styles.marker)
            row.append(item.label, styles.list_selected)
        else:
            row.append("  ", styles.list_normal)
            row.append(item.label, styles.list_normal)
        rows.append(fit(row, width))

        desc = Text("  ", style=styles.panel)
        desc.append(item.description, styles.list_desc)
        rows.append(fit(desc, width))
    return rows[:height]


def render_text_input(state: WizardState, styles: WizardStyles = DEFAULT_STYLES) -> Text:
    """The visible window of the name buffer with its cursor."""
    buffer = state.name_input
    width = max(1, buffer.width)
    line = Text(style=styles.panel)

    if not buffer.value:
        placeholder = buffer.placeholder[:width]
        line.append(placeholder[:1] or " ", styles.cursor)
        line.append(placeholder[1:], styles.placeholder)
        return fit(line, width)

    start = max(0, buffer.cursor - (width - 1))
    visible = buffer.value[start : start + width]
    cursor = buffer.cursor - start
    for i, ch in enumerate(visible):
        line.append(ch, styles.cursor if i == cursor else styles.input_text)
    if cursor >= len(visible):
        line.append(" ", styles.cursor)
    return fit(line, width)


def render_name_input(state: WizardState, styles: WizardStyles = DEFAULT_STYLES) -> list[Text]:
    width = max(1, state.name_input.width)
    box_top = Text("┌" + "─" * (width + 2) + "┐", style=styles.input_border)
    box_mid = Text("│ ", style=styles.input_border)
    box_mid.append_text(render_text_input(state, styles))
    box_mid.append(" │", styles.input_border)
    box_bottom = Text("└" + "─" * (width + 2) + "┘", style=styles.input_border)

    rows = [
        Text("Project name", style=styles.input_label),
        Text(style=styles.panel),
        box_top,
        box_mid,
        box_bottom,
    ]
    if state.name_error:
        rows.append(Text("  " + state.name_error, style=styles.error))
    rows.append(Text(style=styles.panel))
    rows.append(Text("Tip: Use a short, kebab-case name", style=styles.help))
    return rows


def render_confirmation(state: WizardState, styles: WizardStyles = DEFAULT_STYLES) -> list[Text]:
    pending = state.pending

    def row(label: str, value: str) -> Text:
        line = Text(label.ljust(12), style=styles.input_label)
        line.append(value, styles.list_selected)
        return line

    rows = [row("Language", pending.language), row("Framework", pending.framework)]
    if pending.libraries:
        rows.append(row("Libraries", ", ".join(pending.libraries)))
    rows.append(row("Name", pending.name))
    rows.append(Text(style=styles.panel))
    rows.append(Text("Press Enter to create project", style=styles.help))
    return rows


def render_stage_content(
    state: WizardState, width: int, styles: WizardStyles = DEFAULT_STYLES
) -> list[Text]:
    """The active stage's widget, as exactly ``list_height`` rows."""
    height = state.list_height()
    stage = state.stage
    if stage is Stage.LANGUAGE:
        rows = render_selection_list(state.languages, width, height, styles)
    elif stage is Stage.FRAMEWORK:
        rows = render_selection_list(state.frameworks, width, height, styles)
    elif stage is Stage.LIBRARIES:
        rows = render_selection_list(state.libraries, width, height, styles)
    elif stage is Stage.NAME:
        rows = render_name_input(state, styles)
    elif stage is Stage.CONFIRM:
        rows = render_confirmation(state, styles)
    else:
        rows = []

    rows = rows[:height]
    rows += [Text(style=styles.panel) for _ in range(height - len(rows))]
    return [fit(row, width) for row in rows]


# ---------------------------------------------------------------------------
# Status line
# ---------------------------------------------------------------------------


def render_progress_bar(
    fraction: float, width: int = PROGRESS_WIDTH, styles: WizardStyles = DEFAULT_STYLES
) -> Text:
    fraction = max(0.0, min(fraction, 1.0))
    filled = int(round(fraction * width))
    bar = Text(style=styles.panel)
    bar.append("█" * filled, styles.progress_full)
    bar.append("░" * (width - filled), styles.progress_empty)
    return bar


def render_help(keys: KeyMap, styles: WizardStyles = DEFAULT_STYLES) -> Text:
    line = Text(style=styles.panel)
    for i, binding in enumerate(keys.short_help()):
        if i:
            line.append(BINDING_SEPARATOR, styles.help)
        line.append(binding.help_key, styles.help_key)
        line.append(" " + binding.help_desc, styles.help)
    return line


def render_status(state: WizardState, styles: WizardStyles = DEFAULT_STYLES) -> Text:
    """Step label, progress bar and key hints."""
    keys = KeyMap()
    keys.update_for(state.stage)
    line = Text(step_label(state), style=styles.help)
    line.append("  ")
    line.append_text(render_progress_bar(stage_progress(state), styles=styles))
    line.append(HELP_SEPARATOR, styles.help)
    line.append_text(render_help(keys, styles))
    return line


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


def apply_horizontal_offset(line: Text, offset: int, max_width: int) -> Text:
    """Shift a line horizontally by ``offset`` columns.

    A positive offset pads the left and crops the right, so content slides
    in from the right. A negative offset drops leading columns and pads the
    end, so content slides in from the left.
    """
    if offset == 0 or max_width <= 0:
        return line

    if offset > 0:
        shifted = Text(" " * offset, style=line.style)
        shifted.append_text(line)
        return fit(shifted, max_width)

    drop = -offset
    if drop >= len(line):
        return fit(Text(style=line.style), max_width)
    return fit(line[drop:], max_width)


# ---------------------------------------------------------------------------
# Frame
# ---------------------------------------------------------------------------


def _panel_rows(body: list[Text], panel_width: int, styles: WizardStyles) -> list[Text]:
    inner = max(0, panel_width - 2)
    top = Text("╭" + "─" * inner + "╮", style=styles.border)
    bottom = Text("╰" + "─" * inner + "╯", style=styles.border)
    blank = Text("│", style=styles.border)
    blank.append(" " * inner, styles.panel)
    blank.append("│", styles.border)

    rows = [top, blank]
    for body_row in body:
        row = Text("│", style=styles.border)
        row.append("  ", styles.panel)
        row.append_text(body_row)
        row.append("  ", styles.panel)
        row.append("│", styles.border)
        rows.append(row)
    rows += [blank, bottom]
    return [fit(row, panel_width) for row in rows]


def render_wizard(
    state: WizardState,
    anim: AnimationState,
    width: int = 0,
    height: int = 0,
    styles: WizardStyles = DEFAULT_STYLES,
    reveal_columns: int = 3,
) -> Text:
    """
    Render one frame.

    Args:
        state: Wizard state.
        anim: Animation state.
        width: Terminal width; falls back to the last resize, then 96.
        height: Terminal height; falls back to the last resize, then 36.
        styles: Palette to render with.
        reveal_columns: Title columns revealed per reveal tick.

    Returns:
        ``height`` lines of ``width`` cells, or a single message line once
        the run is over.
    """
    if state.error is not None:
        return Text(f"error: {state.error}\n")
    if state.cancelled:
        return Text("cancelled\n")
    if state.stage is Stage.DONE:
        return Text("done\n")

    width = width or state.width or DEFAULT_WIDTH
    height = height or state.height or DEFAULT_HEIGHT
    panel_width = state.panel_width or DEFAULT_PANEL_WIDTH
    panel_height = state.panel_height or DEFAULT_PANEL_HEIGHT

    if not anim.panel_ready:
        scale = anim.entrance.position
        panel_width = max(1, int(panel_width * scale))
        panel_height = max(1, int(panel_height * scale))

    content_width = max(1, panel_width - PANEL_CHROME_WIDTH)
    inner_height = max(1, panel_height - PANEL_CHROME_HEIGHT)

    title_line = Text(stage_title(state.stage), style=styles.list_title)
    subtitle_line = Text(stage_subtitle(state.stage), style=styles.subheader)
    content = render_stage_content(state, content_width, styles)

    offset = anim.transition_offset
    if offset:
        title_line = apply_horizontal_offset(title_line, offset, content_width)
        subtitle_line = apply_horizontal_offset(subtitle_line, offset, content_width)
        content = [apply_horizontal_offset(row, offset, content_width) for row in content]

    blank = Text(style=styles.panel)
    body = [
        *render_title_block(anim, content_width, styles, reveal_columns),
        blank,
        title_line,
        subtitle_line,
        blank,
        *content,
        render_status(state, styles),
    ]
    body = body[:inner_height]
    body += [blank] * (inner_height - len(body))
    body = [fit(row, content_width) for row in body]

    panel = _panel_rows(body, panel_width, styles)[:height]

    top = max(0, (height - len(panel)) // 2)
    left = max(0, (width - panel_width) // 2)
    empty = Text(" " * width, style=styles.frame)

    lines = [empty] * top
    for panel_row in panel:
        row = Text(" " * left, style=styles.frame)
        row.append_text(panel_row)
        lines.append(fit(row, width))
    lines += [empty] * (height - len(lines))
    return Text("\n").join(lines)
