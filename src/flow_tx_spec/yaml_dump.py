"""Shared YAML dump helpers for fixture files."""

from __future__ import annotations

from pathlib import Path

import yaml


class PlainDumper(yaml.SafeDumper):
    pass


def _str_representer(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    # Multi-line Cadence scripts read better as literal blocks.
    style = "|" if "\n" in data else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", data, style=style)


PlainDumper.add_representer(str, _str_representer)


def dump_yaml(data: object) -> str:
    return yaml.dump(data, Dumper=PlainDumper, sort_keys=False, width=4096, allow_unicode=True)


def write_yaml(path: Path, data: object) -> None:
    path.write_text(dump_yaml(data))
