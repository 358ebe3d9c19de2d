"""Loader for the normalized service model (local YAML / JSON files)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError
from ruamel.yaml import YAML

from compose2kube.core.exceptions import ServiceModelLoadError
from compose2kube.models.service import ServiceModel

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}
_JSON_EXTS: Final[set[str]] = {".json"}

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2


class ServiceModelLoader:
    """Read a service model file from disk and validate it."""

    supported_exts: set[str] = _YAML_EXTS | _JSON_EXTS

    @classmethod
    def load(cls, path: str | Path) -> ServiceModel:
        """
        Load and validate a service model.

        The document must be a mapping with a 'services' mapping; any other
        top-level keys (version, networks, ...) are ignored.

        Raises:
            ServiceModelLoadError: If the file is missing, unparsable or does
                not describe valid services
        """
        file_path = Path(path)
        suffix = file_path.suffix.lower()

        if suffix not in cls.supported_exts:
            raise ServiceModelLoadError(
                f"Unsupported extension '{file_path.suffix}'. "
                f"Supported: {', '.join(sorted(cls.supported_exts))}",
                file_path=file_path,
            )

        try:
            raw_text = file_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ServiceModelLoadError(
                f"File not found: {file_path}", file_path=file_path
            ) from exc

        data: Any
        try:
            if suffix in _YAML_EXTS:
                data = _yaml_parser.load(raw_text)
            else:  # .json
                data = json.loads(raw_text)
        except Exception as exc:
            raise ServiceModelLoadError(
                f"Cannot parse {file_path.name}: {exc}", file_path=file_path
            ) from exc

        if not isinstance(data, dict):
            raise ServiceModelLoadError(
                "Top-level object must be a mapping", file_path=file_path
            )
        if not isinstance(data.get("services"), dict):
            raise ServiceModelLoadError(
                "Missing 'services' mapping", file_path=file_path
            )

        try:
            model = ServiceModel.model_validate(data)
        except ValidationError as exc:
            raise ServiceModelLoadError(
                f"Invalid service model: {exc}", file_path=file_path
            ) from exc

        logger.info("Loaded %d service(s) from %s", len(model), file_path)
        return model
