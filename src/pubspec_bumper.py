import logging

from dataclasses import dataclass
from pathlib import Path

from pubspec_manifest import VERSION_FIELD, get_field, load_manifest, write_manifest_atomic
from pubspec_utils import LOGGER_NAME
from pubspec_version import VersionString


logger = logging.getLogger(f"{LOGGER_NAME}.{__name__}")


@dataclass
class BumpResult:
    path: Path
    old: VersionString
    new: VersionString
    written: bool = True


def read_version(manifest_path) -> VersionString:
    data = load_manifest(manifest_path)
    return VersionString.parse(get_field(data, manifest_path))


def bump_version(manifest_path, part="patch", dry_run=False) -> BumpResult:
    """Increment one part of the manifest's version and persist it.

    The build metadata after '+' is kept as is. With dry_run the new version
    is computed but the manifest is not touched.
    """
    manifest_path = Path(manifest_path)
    data = load_manifest(manifest_path)
    old = VersionString.parse(get_field(data, manifest_path))
    new = old.bump(part)
    logger.info(f"{manifest_path}: {old} -> {new} ({part})")

    if dry_run:
        return BumpResult(manifest_path, old, new, written=False)

    data[VERSION_FIELD] = str(new)
    write_manifest_atomic(manifest_path, data)
    return BumpResult(manifest_path, old, new)


def bump_patch(manifest_path) -> None:
    bump_version(manifest_path, part="patch")
