from __future__ import annotations

import logging
from typing import Optional

import gradio as gr

from .csv_format import to_csv
from .errors import KeywordValidationError
from .export import write_csv_file
from .io_utils import read_keyword_file
from .parsing import parse_keywords
from .settings import get_settings

logger = logging.getLogger(__name__)

SAMPLE_DATA = """[
  {"keyword": "react tutorial", "search_volume": 12500},
  {"keyword": "javascript basics", "search_volume": 8900},
  {"keyword": "web development", "search_volume": 15600}
]"""


def convert_handler(raw: Optional[str]):
    """Convert the input box to CSV.

    Returns the CSV text, an update for the error box and one for the download button.
    """
    try:
        records = parse_keywords(raw)
    except KeywordValidationError as exc:
        logger.warning("Rejected keyword input: %s", exc.message)
        return "", gr.update(value=str(exc), visible=True), gr.update(interactive=False)

    csv_text = to_csv(records)
    logger.info("Converted %d keyword records to CSV", len(records))
    return csv_text, gr.update(value="", visible=False), gr.update(interactive=bool(csv_text))


def download_handler(csv_text: Optional[str], file_name: Optional[str]):
    if not csv_text:
        return None, "Nothing to download. Convert some data first."

    settings = get_settings()
    directory = str(settings.export_dir) if settings.export_dir else None
    try:
        path = write_csv_file(csv_text, file_name or settings.default_file_name, directory)
    except OSError as e:
        logger.exception("Failed to write CSV export")
        return None, f"Error during export: {str(e)}"

    return path, f"Export successful! Saved to {path}"


def load_file_handler(file_obj):
    if file_obj is None:
        return gr.update(), "No file uploaded."

    try:
        content = read_keyword_file(file_obj)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read uploaded file: %s", e)
        return gr.update(), f"Error reading file: {str(e)}"

    return content, "File loaded. Click \"Convert to CSV\" to validate it."


def load_sample_handler():
    return SAMPLE_DATA
