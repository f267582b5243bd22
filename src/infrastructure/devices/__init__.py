"""Infrastructure adapters for the devices bounded context.

This module provides the infrastructure layer implementations for device
operations, including loading device definitions from YAML documents.
"""

from .yaml_adapter import YamlDeviceAdapter

__all__ = ["YamlDeviceAdapter"]
