"""
Plain-text rendering of the form help guide, for ``typer.echo()`` and the
dashboard's help panel.
"""

from __future__ import annotations

from mfg_scorer.guide.content import CHECKLIST, FIELD_GUIDES, QUICK_START, TIPS
from mfg_scorer.models.fields import FIELD_REGISTRY, field_groups, get_field
from mfg_scorer.scoring.bands import BAND_TABLE


def render_field(name: str) -> str:
    """Render guidance for one field.

    Args:
        name: snake_case field name or camelCase form name.

    Raises:
        KeyError: If ``name`` is not a form field.
    """
    spec = get_field(name)
    guide = FIELD_GUIDES[spec.name]

    title = spec.label + (" *" if spec.required else "")
    lines = [title]
    if spec.unit:
        lines.append(f"  Unit:    {spec.unit}")
    lines.append(f"  {guide.text}")
    if guide.how_to:
        lines.append(f"  How to:  {guide.how_to}")
    for example in guide.examples:
        lines.append(f"    - {example}")
    if spec.scored:
        lines.append("  (affects the performance score)")
    return "\n".join(lines)


def render_bands() -> str:
    """Render the score interpretation table."""
    lines = ["Score interpretation"]
    upper = 100
    for info in BAND_TABLE:
        lines.append(f"  {info.min_score:>3}-{upper:<3}  {info.category}")
        upper = info.min_score - 1
    return "\n".join(lines)


def render_guide(field: str | None = None) -> str:
    """Render the full guide, or just one field's entry when ``field`` is given."""
    if field is not None:
        return render_field(field)

    lines: list[str] = ["=== Form Guide ===", "", "Quick start"]
    for i, (title, desc) in enumerate(QUICK_START, start=1):
        lines.append(f"  {i}. {title}: {desc}")

    for group in field_groups():
        lines.append("")
        lines.append(f"[{group.upper()}]")
        for spec in FIELD_REGISTRY:
            if spec.group == group:
                lines.append(render_field(spec.name))

    lines.append("")
    lines.append(render_bands())
    lines.append("")
    lines.append("Tips")
    lines.extend(f"  - {tip}" for tip in TIPS)
    lines.append("")
    lines.append("Checklist before submitting")
    lines.extend(f"  [ ] {item}" for item in CHECKLIST)
    lines.append("")
    lines.append("Fields marked * are required.")
    return "\n".join(lines)
