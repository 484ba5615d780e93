from __future__ import annotations

from dataclasses import dataclass, field

from .parser import InputFormat

KEY_VALUE_HEADER = """\
# Fill in the fields, save and close the editor.
# Lines starting with '#' are ignored; remove the '#' to use a field.
# Repeat AUTHOR= or EDITOR= for several people. AUTHOR=et al. ends the list.
# Quit without saving or delete every field to cancel.
"""

TAGGED_HEADER = """\
Fill in the blocks, save and close the editor.
Separate several names with '/' or put one name per line; 'et al.' ends the list.
Quit without saving or delete every block to cancel.
"""


@dataclass(slots=True)
class TemplateValues:
    title: str = ""
    year: str = ""
    authors: list[str] = field(default_factory=list)
    editors: list[str] = field(default_factory=list)


def _render_key_value(values: TemplateValues) -> str:
    lines = [KEY_VALUE_HEADER, f"TITLE={values.title}", f"YEAR={values.year}"]
    if values.authors:
        lines.extend(f"AUTHOR={name}" for name in values.authors)
    else:
        lines.append("AUTHOR=")
    lines.append("#AUTHOR=")
    if values.editors:
        lines.extend(f"EDITOR={name}" for name in values.editors)
    lines.append("#EDITOR=")
    return "\n".join(lines) + "\n"


def _render_tagged(values: TemplateValues) -> str:
    blocks = [
        ("title", [values.title]),
        ("year", [values.year]),
        ("authors", values.authors or [""]),
        ("editors", values.editors or [""]),
    ]
    lines = [TAGGED_HEADER]
    for tag, content in blocks:
        lines.append(f"<{tag}>")
        lines.extend(content)
        lines.append(f"</{tag}>")
    return "\n".join(lines) + "\n"


def render_template(
    values: TemplateValues | None = None,
    input_format: InputFormat = InputFormat.KEY_VALUE,
) -> str:
    values = values or TemplateValues()
    if input_format is InputFormat.TAGGED:
        return _render_tagged(values)
    return _render_key_value(values)
