from pathlib import Path
from typing import Union

from gedcom_json.logger import get_logger

log = get_logger("file_loader")


def load_file(path: Union[str, Path]) -> str:
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")

    text = file_path.read_text(encoding="utf-8")
    log.info("Loaded file: %s (%d chars)", file_path, len(text))
    return text
