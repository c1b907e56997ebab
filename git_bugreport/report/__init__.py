"""Report assembly and output."""

from .models import Report, Section
from .template import BUG_TEMPLATE
from .assembler import build_report, create_context
from .writer import REPORT_PREFIX, launch_editor, report_path, write_report

__all__ = [
    "Report",
    "Section",
    "BUG_TEMPLATE",
    "build_report",
    "create_context",
    "REPORT_PREFIX",
    "launch_editor",
    "report_path",
    "write_report",
]
