"""
Resource serializer.

One generic encode path for every resource shape: the model is dumped to
plain data with wire (camelCase) names, then written as JSON or YAML. Both
formats encode exactly the same object graph.
"""

import json
import logging
from io import StringIO
from typing import Any, TypeVar

from pydantic import BaseModel
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.representer import RoundTripRepresenter

from compose2kube.core.exceptions import SerializationError
from compose2kube.core.protocols import Serializer

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)

# Plain scalars that YAML 1.1 readers (the Kubernetes API server) load as booleans
_YAML11_BOOLEANS = frozenset({"y", "yes", "n", "no", "on", "off", "true", "false"})


class _KubeRepresenter(RoundTripRepresenter):
    """Quote strings that would change type under a YAML 1.1 reader."""

    def represent_str(self, data: str) -> Any:
        if data.lower() in _YAML11_BOOLEANS:
            return self.represent_scalar("tag:yaml.org,2002:str", data, style="'")
        return super().represent_str(data)


_KubeRepresenter.add_representer(str, _KubeRepresenter.represent_str)


class ResourceSerializer(Serializer):
    """Encode and decode resource models as JSON or YAML bytes."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self._logger = logger.getChild(self.__class__.__name__)
        self._yaml = YAML()
        self._configure_yaml()
        self._yaml_loader = YAML(typ="safe")

    def _configure_yaml(self) -> None:
        """Configure YAML output formatting"""
        self._yaml.Representer = _KubeRepresenter
        self._yaml.indent(mapping=2, sequence=4, offset=2)
        self._yaml.default_flow_style = False
        self._yaml.allow_unicode = True
        self._yaml.width = 4096

    @staticmethod
    def to_data(resource: BaseModel) -> dict[str, Any]:
        """Dump a resource to plain data, omitting unset fields."""
        return resource.model_dump(mode="json", by_alias=True, exclude_none=True)

    def serialize(self, resource: BaseModel, generate_yaml: bool) -> bytes:
        """
        Encode a resource object.

        Args:
            resource: Any resource model
            generate_yaml: YAML if True, JSON otherwise

        Returns:
            The encoded document

        Raises:
            SerializationError: If the resource cannot be encoded
        """
        kind = getattr(resource, "kind", resource.__class__.__name__)
        metadata = getattr(resource, "metadata", None)
        name = getattr(metadata, "name", None)

        try:
            data = self.to_data(resource)
            if generate_yaml:
                stream = StringIO()
                self._yaml.dump(data, stream)
                text = stream.getvalue()
            else:
                text = json.dumps(data, indent=2, ensure_ascii=False)
        except (TypeError, ValueError, YAMLError) as e:
            raise SerializationError(
                f"Failed to serialize {kind}: {e}",
                resource_name=name,
                resource_kind=kind,
            ) from e

        self._logger.debug(f"Serialized {kind} '{name}' ({len(text)} chars)")
        return text.encode(self.encoding)

    def deserialize(self, data: bytes, model_cls: type[_M], generate_yaml: bool) -> _M:
        """Decode bytes produced by serialize() back into a model."""
        text = data.decode(self.encoding)
        if generate_yaml:
            raw = self._yaml_loader.load(text)
        else:
            raw = json.loads(text)
        return model_cls.model_validate(raw)


_default_serializer = ResourceSerializer()


def serialize(resource: BaseModel, generate_yaml: bool) -> bytes:
    """Encode a resource with a shared default serializer."""
    return _default_serializer.serialize(resource, generate_yaml)
