"""Resolve Docker-style ``*_FILE`` secrets into environment variables."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

SECRET_FILE_SUFFIX = "_FILE"


def load_secret_file_variables() -> None:
    """
    Expose the contents of every ``KEY_FILE`` as ``KEY``.

    Typical use is ``ORION_CREDENTIAL_FILE=/run/secrets/orion_credential``
    holding the JSON header mapping sent to Orion. A variable that is
    already set wins over its file. Unreadable files are logged and skipped.
    """

    for key, file_path in list(os.environ.items()):
        if not key.endswith(SECRET_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(SECRET_FILE_SUFFIX)]
        if os.environ.get(target_key):
            continue
        try:
            value = Path(file_path).read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            event, error = "env.secret_file.missing", str(exc)
        except UnicodeDecodeError as exc:
            event, error = "env.secret_file.decode_failed", str(exc)
        except OSError as exc:
            event, error = "env.secret_file.load_failed", str(exc)
        else:
            os.environ[target_key] = value
            continue
        logger.warning(event, extra={"key": key, "path": file_path, "error": error})
