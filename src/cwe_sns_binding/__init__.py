"""Bind EventBridge rules to Lambda functions through SNS with a dead-letter queue."""

from .builders import InvalidRuleResourceError, TargetLimitExceededError
from .enumerator import BindingEnumerator
from .errors import BindingError
from .models import BindingConfig, ResourceConflictError, ResourceGraph, ServiceDefinition
from .normalization import InvalidFieldTypeError, MissingRequiredFieldError, normalize_config
from .pipeline import MutationPipeline
from .plugin import CweSnsPlugin, UnsupportedProviderError

__all__ = [
    "BindingConfig",
    "BindingEnumerator",
    "BindingError",
    "CweSnsPlugin",
    "InvalidFieldTypeError",
    "InvalidRuleResourceError",
    "MissingRequiredFieldError",
    "MutationPipeline",
    "ResourceConflictError",
    "ResourceGraph",
    "ServiceDefinition",
    "TargetLimitExceededError",
    "UnsupportedProviderError",
    "normalize_config",
]
