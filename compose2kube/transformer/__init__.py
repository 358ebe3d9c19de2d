"""Transformation engine: normalized services to Kubernetes resources."""

from .bundle import OutputBundle, ResourceKind, ServiceOutputs
from .kubernetes import KubernetesTransformer
from .serializer import ResourceSerializer, serialize

__all__ = [
    "KubernetesTransformer",
    "OutputBundle",
    "ServiceOutputs",
    "ResourceKind",
    "ResourceSerializer",
    "serialize",
]
