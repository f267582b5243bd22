"""YAML adapter for DeviceRepository.

Implements loading of device definition documents (YAML, or JSON as its
subset) and returns validated DeviceDefinition Value Objects. Merging them
into a catalog is left to DeviceCatalog.load.

Accepted document shapes:

    devices:
      - name: Big Dish
        aliases: [BD]
        power: 1.0e+12
        combinability_exponent: 0.75
        kind: ground

or the bare list under ``devices``. ``exponent`` is accepted as a short
spelling of ``combinability_exponent``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from domain.devices.errors import InvalidDeviceFileError
from domain.devices.value_objects import DeviceDefinition

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

_ALLOWED_SUFFIXES = (".yaml", ".yml", ".json")


def _records(document: Any, name: str) -> list[Any]:
    if isinstance(document, Mapping):
        if "devices" not in document:
            raise InvalidDeviceFileError(f"{name}: missing top-level 'devices' list")
        document = document["devices"]
    if not isinstance(document, list):
        raise InvalidDeviceFileError(
            f"{name}: expected a list of devices, got {type(document).__name__}"
        )
    return document


def _normalize(record: Any, name: str, index: int) -> dict[str, Any]:
    if not isinstance(record, Mapping):
        raise InvalidDeviceFileError(f"{name}: device #{index} is not a mapping")
    fields = dict(record)
    if "exponent" in fields:
        if "combinability_exponent" in fields:
            raise InvalidDeviceFileError(
                f"{name}: device #{index} sets both 'exponent' and "
                "'combinability_exponent'"
            )
        fields["combinability_exponent"] = fields.pop("exponent")
    aliases = fields.get("aliases")
    if isinstance(aliases, str):
        fields["aliases"] = (aliases,)
    elif aliases is None:
        fields.pop("aliases", None)
    return fields


class YamlDeviceAdapter:
    """Infrastructure adapter for loading device definitions from YAML files."""

    def load_devices(self, file_path: Path | str) -> tuple[DeviceDefinition, ...]:
        """Parse ``file_path`` and return its definitions in document order.

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidDeviceFileError: On unsupported extension, empty file,
                YAML syntax errors, wrong document shape or invalid records
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(str(path))

        # Extension allowlist
        if path.suffix.lower() not in _ALLOWED_SUFFIXES:
            raise InvalidDeviceFileError(f"Unsupported file extension: {path.suffix}")

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            # Log only the filename to avoid leaking absolute paths
            logger.error(
                "Failed to read %s (errno=%s, strerror=%s)",
                path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise
        except UnicodeDecodeError as e:
            raise InvalidDeviceFileError(f"{path.name}: not UTF-8 text") from e

        if not text.strip():
            raise InvalidDeviceFileError(f"{path.name}: empty file")

        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise InvalidDeviceFileError(f"{path.name}: malformed document: {e}") from e

        definitions: list[DeviceDefinition] = []
        for index, record in enumerate(_records(document, path.name)):
            fields = _normalize(record, path.name, index)
            try:
                definitions.append(DeviceDefinition.model_validate(fields))
            except ValidationError as e:
                raise InvalidDeviceFileError(
                    f"{path.name}: device #{index} is invalid: {e}"
                ) from e

        if not definitions:
            logger.warning("Device file %s: no devices defined", path.name)
        logger.debug("Device file %s: parsed %d definitions", path.name, len(definitions))
        return tuple(definitions)
