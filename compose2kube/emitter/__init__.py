"""Writing of converted resources: emission policy and chart packaging."""

from .chart import HelmChartPackager
from .emission import ResourceEmitter, resource_file_name

__all__ = ["ResourceEmitter", "HelmChartPackager", "resource_file_name"]
