import os
import stat
import logging
import tempfile
import yaml

from pathlib import Path

from pubspec_errors import MissingFieldError
from pubspec_utils import LOGGER_NAME


logger = logging.getLogger(f"{LOGGER_NAME}.{__name__}")

VERSION_FIELD = "version"


def load_manifest(path):
    """Read a YAML manifest. An empty file loads as an empty mapping."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    logger.debug(f"Loaded manifest {path}")
    return {} if data is None else data


def get_field(data, path=None, field=VERSION_FIELD):
    if not isinstance(data, dict) or field not in data:
        raise MissingFieldError(field, path)
    return data[field]


def dump_manifest(data) -> str:
    return yaml.safe_dump(
        data,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def write_manifest_atomic(path, data):
    """Write the manifest through a temp file renamed over the target.

    On failure the original file is left as it was and the temp file is removed.
    A symlinked manifest is written through to its target and stays a link.
    """
    path = Path(path).resolve()
    text = dump_manifest(data)

    temp_path = None
    try:
        fd, temp_name = tempfile.mkstemp(
            prefix=".pubspec_", suffix=".tmp", dir=str(path.parent)
        )
        os.close(fd)
        temp_path = Path(temp_name)
        # mkstemp creates the file 0600
        if path.exists():
            os.chmod(temp_path, stat.S_IMODE(path.stat().st_mode))

        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())

        os.replace(temp_path, path)
        temp_path = None
        logger.info(f"Manifest written to {path}")
    finally:
        if temp_path is not None and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                logger.warning(f"Could not remove temp file {temp_path}")
