import os
import yaml

from dataclasses import dataclass, fields, replace
from typing import Optional

from pubspec_version import PARTS


# pubspec.yaml two directories above where the release script is run
DEFAULT_MANIFEST_PATH = os.path.join("..", "..", "pubspec.yaml")


@dataclass
class BumpConfig:
    manifest_path: str = DEFAULT_MANIFEST_PATH
    part: str = "patch"
    dry_run: bool = False
    log_path: Optional[str] = None

    def __post_init__(self):
        if self.part not in PARTS:
            raise ValueError(f"part must be one of {PARTS}, got {self.part!r}")


def load_config(params_path=None, section="bump", **overrides) -> BumpConfig:
    """Build a BumpConfig from defaults, a params.yaml section, then overrides.

    Overrides whose value is None are ignored so unset CLI flags fall through.
    """
    values = {}
    if params_path is not None:
        with open(params_path, "r", encoding="utf-8") as f:
            all_params = yaml.safe_load(f) or {}
        if not isinstance(all_params, dict):
            raise ValueError(f"{params_path} must contain a mapping")
        params = all_params.get(section) or {}
        if not isinstance(params, dict):
            raise ValueError(f"'{section}' section in {params_path} must be a mapping")
        known = {f.name for f in fields(BumpConfig)}
        unknown = sorted(set(params) - known)
        if unknown:
            raise ValueError(f"unknown keys in '{section}' section: {', '.join(unknown)}")
        values.update(params)

    values.update({k: v for k, v in overrides.items() if v is not None})
    return replace(BumpConfig(), **values)
