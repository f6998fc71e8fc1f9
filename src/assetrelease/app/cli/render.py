"""Plan rendering for the terminal."""

import click

from ...core import Action, Plan

NO_CHANGES = "No changes detected. All files up-to-date."

_MARKERS = {
    Action.UPLOAD: ("+", "green"),
    Action.UPDATE: ("~", "yellow"),
    Action.DELETE: ("-", "red"),
}


def render_entry(key: str, action: Action) -> str:
    """Render one plan line; kept and skipped keys carry no marker."""
    if action in _MARKERS:
        symbol, color = _MARKERS[action]
        return f"  {click.style(symbol, fg=color)} {key}"
    return f"    {key}"


def render_plan(plan: Plan) -> list[str]:
    """Render the whole plan, one line per key in sorted order."""
    lines = [
        "An execution plan has been generated and is shown below.",
        "Actions are indicated with the following symbols:",
        f"  {click.style('+', fg='green')} Upload new file",
        f"  {click.style('~', fg='yellow')} Update remote file in-place",
        f"  {click.style('-', fg='red')} Delete remote file",
        "",
        "Current execution plan:",
    ]
    lines.extend(render_entry(key, plan.entries[key].action) for key in plan.sorted_keys)
    return lines


def render_summary(plan: Plan) -> str:
    counts = plan.counts()
    summary = (
        f"Plan: {counts[Action.UPLOAD]} to upload, {counts[Action.UPDATE]} to update, "
        f"{counts[Action.DELETE]} to delete, {counts[Action.KEEP]} unchanged"
    )
    if counts[Action.SKIP]:
        summary += f", {counts[Action.SKIP]} skipped"
    return f"{summary}."
