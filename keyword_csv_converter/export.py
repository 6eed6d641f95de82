from __future__ import annotations

import logging
import os
import tempfile
from typing import Optional

logger = logging.getLogger(__name__)

CSV_MIME_TYPE = "text/csv"
CSV_EXTENSION = ".csv"
DEFAULT_FILE_NAME = "keywords"


def build_csv_filename(base_name: Optional[str], default: str = DEFAULT_FILE_NAME) -> str:
    """Turn a user-supplied base name into a '<name>.csv' file name.

    Directory parts are dropped so the file always lands in the export directory.
    """
    name = os.path.basename((base_name or "").strip().replace("\\", "/"))
    if name.lower().endswith(CSV_EXTENSION):
        name = name[: -len(CSV_EXTENSION)]
    if not name.strip():
        name = default
    return name + CSV_EXTENSION


def write_csv_file(
    csv_text: str,
    base_name: Optional[str] = DEFAULT_FILE_NAME,
    directory: Optional[str] = None,
) -> str:
    """Write CSV text as UTF-8 to '<directory>/<base_name>.csv' and return the path.

    Defaults to the system temp directory, which the download component serves from.
    """
    if not csv_text:
        raise ValueError("Nothing to download")

    target_dir = directory or tempfile.gettempdir()
    os.makedirs(target_dir, exist_ok=True)
    path = os.path.join(target_dir, build_csv_filename(base_name))

    with open(path, 'w', newline='', encoding='utf-8') as f:
        f.write(csv_text)

    logger.info("Wrote %d bytes of %s to %s", len(csv_text.encode('utf-8')), CSV_MIME_TYPE, path)
    return path
