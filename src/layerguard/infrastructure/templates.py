"""Jinja2 environment for the files layerguard writes."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable

from jinja2 import Environment, PackageLoader, StrictUndefined

_BARE_KEY = re.compile(r"[A-Za-z0-9_-]+")


def toml_str(value: str) -> str:
    """*value* as a TOML basic string."""
    return json.dumps(value)


def toml_key(value: str) -> str:
    """*value* as a TOML key, quoted only when it is not a bare key."""
    return value if _BARE_KEY.fullmatch(value) else toml_str(value)


def toml_list(values: Iterable[str]) -> str:
    return "[" + ", ".join(toml_str(v) for v in values) + "]"


def build_template_environment() -> Environment:
    """Environment over the packaged ``templates/`` with TOML filters."""
    env = Environment(
        loader=PackageLoader("layerguard", "templates"),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.filters.update(toml_str=toml_str, toml_key=toml_key, toml_list=toml_list)
    return env
