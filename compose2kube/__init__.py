"""compose2kube: convert normalized compose services to Kubernetes resources."""

__version__ = "0.1.0"
