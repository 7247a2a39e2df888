"""Preset files and field overrides.

A preset file is JSON with optional ``printers`` and ``parts`` sections, each
mapping a label to a complete record::

    {
        "printers": {
            "Workshop 0.4mm": {"nozzle_diameter": 0.4, "layer_height": 0.2, ...}
        },
        "parts": {
            "Gear": {"volume": 8000, "surface_area": 4200, ...}
        }
    }

Overrides are ``key=value`` strings (the CLI's ``--set``) applied on top of a
selected preset.
"""

import json
import logging
import os
from dataclasses import fields, replace
from typing import Dict, Iterable, Mapping, Tuple, Type, TypeVar, Union

from print_estimator.errors import ConfigError, InvalidInputError
from print_estimator.models import PartParameters, PrinterSettings

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "PRINT_ESTIMATOR_LOG_LEVEL"

PRINTER_FIELDS = frozenset(f.name for f in fields(PrinterSettings))
PART_FIELDS = frozenset(f.name for f in fields(PartParameters))

Number = Union[int, float]
Record = TypeVar("Record", PrinterSettings, PartParameters)


def default_log_level() -> str:
    """Log level from the environment, WARNING when unset."""
    return os.getenv(LOG_LEVEL_ENV, "WARNING").upper()


def _build_record(record_type: Type[Record], label: str, raw: object, source: str) -> Record:
    if not isinstance(raw, dict):
        raise ConfigError(f"{source}: preset {label!r} must be an object")

    known = PRINTER_FIELDS if record_type is PrinterSettings else PART_FIELDS
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"{source}: preset {label!r} has unknown fields: {', '.join(unknown)}")
    missing = sorted(known - set(raw))
    if missing:
        raise ConfigError(f"{source}: preset {label!r} is missing fields: {', '.join(missing)}")

    try:
        return record_type(**raw)
    except InvalidInputError as e:
        raise ConfigError(f"{source}: preset {label!r}: {e}") from None


def load_presets(path: str) -> Tuple[Dict[str, PrinterSettings], Dict[str, PartParameters]]:
    """Load printer and part presets from a JSON file.

    Args:
        path: Path to the preset file

    Returns:
        Tuple of (printer presets, part presets), each keyed by label. A
        section absent from the file yields an empty dict.

    Raises:
        ConfigError: If the file is missing or unreadable, is not UTF-8 JSON, or a preset
            has unknown, missing or invalid fields
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError as e:
        raise ConfigError(f"Preset file not found: {e.filename}") from None
    except OSError as e:
        raise ConfigError(f"Cannot read preset file {path}: {e.strerror or e}") from None
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path}: not valid UTF-8 ({e.reason} at byte {e.start})") from None
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"{path}: invalid JSON ({e.msg}, line {e.lineno}, column {e.colno})"
        ) from None

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be an object")

    printers = {}
    parts = {}
    for section, record_type, target in (
        ("printers", PrinterSettings, printers),
        ("parts", PartParameters, parts),
    ):
        entries = data.get(section, {})
        if not isinstance(entries, dict):
            raise ConfigError(f"{path}: {section!r} must be an object")
        for label, raw in entries.items():
            target[label] = _build_record(record_type, label, raw, path)

    logger.info("Loaded %d printer and %d part presets from %s", len(printers), len(parts), path)
    return printers, parts


def _parse_number(text: str) -> Number:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise ConfigError(f"Override value must be a number, got {text!r}") from None


def parse_overrides(pairs: Iterable[str]) -> Dict[str, Number]:
    """Parse ``key=value`` strings into a field override dict.

    Whole numbers stay ``int`` so ``num_walls=3`` validates; everything else
    becomes ``float``. Later pairs win over earlier ones.

    Raises:
        ConfigError: If a pair has no ``=`` or its value is not a number
    """
    out = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise ConfigError(f"Invalid override {pair!r}, expected key=value")
        key, value = pair.split("=", 1)
        key = key.strip()
        if not key:
            raise ConfigError(f"Invalid override {pair!r}, empty key")
        out[key] = _parse_number(value.strip())
    return out


def split_overrides(
    overrides: Mapping[str, Number],
) -> Tuple[Dict[str, Number], Dict[str, Number]]:
    """Route overrides to printer fields and part fields.

    Raises:
        ConfigError: If a key names neither a printer nor a part field
    """
    printer_overrides = {}
    part_overrides = {}
    for key, value in overrides.items():
        if key in PRINTER_FIELDS:
            printer_overrides[key] = value
        elif key in PART_FIELDS:
            part_overrides[key] = value
        else:
            raise ConfigError(f"Unknown field: {key!r}")
    return printer_overrides, part_overrides


def apply_overrides(record: Record, overrides: Mapping[str, Number]) -> Record:
    """Return a copy of record with the given fields replaced.

    The new record is validated as a whole; the original is left untouched.

    Raises:
        ConfigError: If a key is not a field of the record
        InvalidInputError: If an overridden value is invalid
    """
    known = {f.name for f in fields(record)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigError(
            f"Unknown {type(record).__name__} fields: {', '.join(unknown)}"
        )
    if not overrides:
        return record
    return replace(record, **overrides)
