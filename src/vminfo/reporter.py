from pathlib import Path

import jinja2

from .core import NONE_LABEL
from .schemas.compute import VMReport

TEMPLATE_NAME = "report.txt.j2"


def _environment() -> jinja2.Environment:
    template_dir = Path(__file__).parent / "templates"
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )


def render_report(report: VMReport) -> str:
    """
    Renders the plain-text VM report, including suggested backup commands.
    """
    template = _environment().get_template(TEMPLATE_NAME)
    return template.render(r=report, none_label=NONE_LABEL)
