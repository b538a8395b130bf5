"""Resolve Docker-style ``*_FILE`` secrets into plain environment variables.

``INFLUX_TOKEN_FILE=/run/secrets/influx_token`` exposes the file content
as ``INFLUX_TOKEN`` unless ``INFLUX_TOKEN`` is already set.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_SUFFIX = "_FILE"


def _read_secret(key: str, file_path: str) -> Optional[str]:
    try:
        return Path(file_path).read_text(encoding="utf-8").strip()
    except FileNotFoundError as exc:
        event = "env.secret_file.missing"
        error = exc
    except UnicodeDecodeError as exc:
        event = "env.secret_file.decode_failed"
        error = exc
    except OSError as exc:
        event = "env.secret_file.load_failed"
        error = exc
    logger.warning(event, extra={"key": key, "path": file_path, "error": str(error)})
    return None


def load_secret_file_variables() -> None:
    """Expose every readable ``KEY_FILE`` secret as ``KEY``."""

    for key, file_path in list(os.environ.items()):
        if not key.endswith(_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(_SUFFIX)]
        if os.environ.get(target_key):
            continue
        value = _read_secret(key, file_path)
        if value is not None:
            os.environ[target_key] = value


load_secret_file_variables()
