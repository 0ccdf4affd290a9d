#!/usr/bin/env python3
import sys
import logging
import argparse
import yaml

from pathlib import Path

_src_dir = Path(__file__).resolve().parent.parent / "src"
if _src_dir.is_dir() and str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from pubspec_bumper import bump_version
from pubspec_config import load_config
from pubspec_errors import BumpError
from pubspec_utils import setup_logging
from pubspec_version import PARTS


def build_parser():
    p = argparse.ArgumentParser(
        description="Increment the version in a pubspec.yaml, keeping the +build suffix."
    )
    p.add_argument("--file", dest="manifest_path", help="manifest to bump (default: ../../pubspec.yaml)")
    p.add_argument("--part", choices=PARTS, help="version part to increment (default: patch)")
    p.add_argument("--dry-run", action="store_true", default=None, help="show the new version without writing")
    p.add_argument("--params", help="params.yaml with a 'bump' section")
    p.add_argument("--log-file", dest="log_path", help="also write logs to this file")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = load_config(
            args.params,
            manifest_path=args.manifest_path,
            part=args.part,
            dry_run=args.dry_run,
            log_path=args.log_path,
        )
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"invalid configuration: {e}", file=sys.stderr); return 1

    if args.verbose:
        level = logging.DEBUG
    elif config.log_path:
        level = logging.INFO
    else:
        level = logging.WARNING
    setup_logging(config.log_path, level=level)

    path = Path(config.manifest_path)
    if not path.exists():
        print(f"{path} not found", file=sys.stderr); return 1

    try:
        res = bump_version(path, config.part, dry_run=config.dry_run)
    except BumpError as e:
        print(f"{path}: {e}", file=sys.stderr); return 1
    except yaml.YAMLError as e:
        print(f"{path}: invalid YAML: {e}", file=sys.stderr); return 1
    except UnicodeDecodeError as e:
        print(f"{path}: not valid UTF-8: {e}", file=sys.stderr); return 1
    except OSError as e:
        print(f"{path}: {e}", file=sys.stderr); return 1

    if res.written:
        print(f"Bumped {path}: {res.old} -> {res.new}")
    else:
        print(f"{path}: {res.old} -> {res.new} (dry run)")
    return 0


if __name__ == '__main__':
    sys.exit(main())
