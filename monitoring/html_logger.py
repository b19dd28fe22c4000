# monitoring/html_logger.py
"""
HTML logger for the monitoring application.

This module provides simple logging functions (info, warn, error)
that append log entries to an HTML file. The generated log file
can be displayed directly in a browser and styled with basic CSS.
Workflow outcomes (camp submissions, census reminders, refused
attempts) are logged here so that staff can follow them without
server access.
"""

from pathlib import Path

from django.conf import settings
from django.utils.html import escape
from django.utils.timezone import now

# HTML header and footer for the log file
HEADER = """<!doctype html>
<html lang="de"><head><meta charset="utf-8"><title>Journal</title>
<style>
.log-info{ background:#e3f2fd; color:#0d47a1; padding:.5rem; border-left:4px solid #1976d2; margin:.25rem 0; }
.log-warn{ background:#fff8e1; color:#e65100; padding:.5rem; border-left:4px solid #ff9800; margin:.25rem 0; }
.log-error{ background:#ffebee; color:#b71c1c; padding:.5rem; border-left:4px solid #f44336; margin:.25rem 0; }
.code{ font-family:monospace; }
</style></head><body>
<h3>Applikationsjournal</h3>
"""
FOOTER = "</body></html>"


def log_file() -> Path:
    """
    Return the path of the HTML log file.

    The directory is taken from the ``PBS_LOG_DIR`` setting and
    defaults to ``logs/`` below ``BASE_DIR``.
    """
    log_dir = Path(getattr(settings, "PBS_LOG_DIR", Path(settings.BASE_DIR) / "logs"))
    return log_dir / "app.log.html"


def _ensure_file() -> Path:
    """
    Ensure that the log file exists.

    If the file does not exist, it is created with the HTML header.
    """
    path = log_file()
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(HEADER, encoding="utf-8")
    return path


def _append(level: str, message: str):
    """
    Append a single HTML entry to the log file.

    Parameters
    ----------
    level : str
        ``info``, ``warn`` or ``error``.
    message : str
        The message to log; escaped before writing.
    """
    ts = now().strftime("%Y-%m-%d %H:%M:%S")
    line = (
        f'<div class="log-{level}"><strong>[{level.upper()} {ts}]</strong> '
        f"{escape(message)}</div>"
    )
    with _ensure_file().open("a", encoding="utf-8") as f:
        f.write(line + "\n")


def info(message: str):
    """
    Log an informational message.
    """
    _append("info", message)


def warn(message: str):
    """
    Log a warning message.
    """
    _append("warn", message)


def error(message: str):
    """
    Log an error message.
    """
    _append("error", message)
