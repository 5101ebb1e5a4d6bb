"""Resolve analyzer options from defaults, the environment and inline file flags.

Supported directive formats (first 25 lines):
- # @jyro: {"warnOnHostFunctions": false}
- # @jyro: warnOnHostFunctions=false

Precedence, lowest first: defaults, ``JYROLINT_*`` environment variables,
inline directives, explicit overrides (command-line flags).
"""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger("jyrolint.config")

_MAX_SCAN_LINES = 25
_DIRECTIVE = "@jyro"
_ENV_PREFIX = "JYROLINT_"

# editor-setting key -> option attribute
_ALIASES = {
    "warnOnHostFunctions": "warn_on_host_functions",
}


class ConfigError(ValueError):
    """An option value could not be interpreted."""


def _parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "on", "1"):
            return True
        if lowered in ("false", "no", "off", "0"):
            return False
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ConfigError(f"option {key!r} expects a boolean, got {value!r}")


@dataclass(frozen=True)
class AnalyzerOptions:
    warn_on_host_functions: bool = True

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], base: Optional["AnalyzerOptions"] = None) -> "AnalyzerOptions":
        """Build options from a settings mapping, on top of ``base``.

        Unknown keys are ignored so editor settings can be passed as-is.
        """
        values = dict((f.name, getattr(base or cls(), f.name)) for f in fields(cls))
        for key, raw in mapping.items():
            attr = _ALIASES.get(key, key)
            if attr not in values:
                logger.debug("ignoring unknown option %r", key)
                continue
            values[attr] = _parse_bool(key, raw)
        return cls(**values)


def parse_inline_flags(source: str) -> Dict[str, Any]:
    flags: Dict[str, Any] = {}
    if not source:
        return flags

    for line in source.splitlines()[:_MAX_SCAN_LINES]:
        stripped = line.strip()
        if not stripped.startswith("#") or _DIRECTIVE not in stripped:
            continue

        directive = stripped.lstrip("#").strip()
        if not directive.lower().startswith(_DIRECTIVE):
            continue
        directive = directive[len(_DIRECTIVE):].strip()
        if directive.startswith(":"):
            directive = directive[1:].strip()

        # JSON object form
        if directive.startswith("{"):
            try:
                parsed = json.loads(directive)
            except ValueError:
                logger.debug("unreadable @jyro directive: %s", directive)
                continue
            if isinstance(parsed, dict):
                flags.update(parsed)
            continue

        # key=value form (semicolon or comma separated)
        for part in re.split(r"[;,]", directive):
            if "=" not in part:
                continue
            key, raw_val = part.split("=", 1)
            if key.strip():
                flags[key.strip()] = raw_val.strip()

    return flags


def options_from_environ(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    environ = os.environ if environ is None else environ
    found = {}
    for attr in (f.name for f in fields(AnalyzerOptions)):
        value = environ.get(_ENV_PREFIX + attr.upper())
        if value is not None:
            found[attr] = value
    return found


def resolve_options(
    source: str = "",
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AnalyzerOptions:
    options = AnalyzerOptions()
    for origin, layer in (
        ("environment", options_from_environ(environ)),
        ("inline", parse_inline_flags(source)),
        ("overrides", {k: v for k, v in (overrides or {}).items() if v is not None}),
    ):
        if layer:
            logger.debug("applying %s options: %s", origin, layer)
            options = AnalyzerOptions.from_mapping(layer, base=options)
    return options
