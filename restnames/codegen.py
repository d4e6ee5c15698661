"""Render the naming manifest template and write it out."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "names.md.j2"


def render(context: dict[str, Any]) -> str:
    """Render the naming manifest for a context from build_context."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    template = env.get_template(TEMPLATE_NAME)
    return template.render(**context)


def generate(context: dict[str, Any], output_path: str | Path) -> Path:
    """Render the manifest and write it to *output_path*."""
    output = render(context)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(output)

    print(f"Generated {output_path} ({context['operation_count']} operations)")
    return output_path
