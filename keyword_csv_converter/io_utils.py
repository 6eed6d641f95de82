from __future__ import annotations

import os

# utf-8-sig also accepts files saved with a byte order mark.
FILE_ENCODING = 'utf-8-sig'


def read_keyword_file(file_obj) -> str:
    """Read the text of an uploaded JSON file, a file-like object or a path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if isinstance(file_obj, (str, os.PathLike)):
        path = file_obj
    elif hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            return content.decode(FILE_ENCODING)
        return content.lstrip('\ufeff')
    else:
        # Gradio upload wrappers expose the temp file path as .name
        path = file_obj.name

    with open(path, 'r', encoding=FILE_ENCODING) as f:
        return f.read()
