"""Data models for binding configuration, references and the resource graph."""

from .config import (
    DEFAULT_DLQ_POLICY_RESOURCE_NAME,
    DEFAULT_DLQ_RESOURCE_NAME,
    DEFAULT_TOPIC_POLICY_RESOURCE_NAME,
    BindingConfig,
)
from .graph import ResourceConflictError, ResourceGraph
from .reference import LiteralValue, Reference, SymbolicRef
from .service import FunctionDefinition, ServiceDefinition

__all__ = [
    "BindingConfig",
    "DEFAULT_DLQ_POLICY_RESOURCE_NAME",
    "DEFAULT_DLQ_RESOURCE_NAME",
    "DEFAULT_TOPIC_POLICY_RESOURCE_NAME",
    "FunctionDefinition",
    "LiteralValue",
    "Reference",
    "ResourceConflictError",
    "ResourceGraph",
    "ServiceDefinition",
    "SymbolicRef",
]
