from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import TicketReport

TEMPLATES_DIR = Path(__file__).resolve().parent / 'templates'


def render_report(report: TicketReport) -> str:
    """Render the plain-text report printed to stdout."""
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(['html', 'xml']),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    tpl = env.get_template('report.txt.j2')
    return tpl.render(
        route=report.route,
        carrier_minimums=report.carrier_minimums,
        stats=report.price_statistics,
    )
