"""Normalized ``cweSns`` binding configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .reference import LiteralValue, Reference, SymbolicRef

DEFAULT_TOPIC_POLICY_RESOURCE_NAME = "CWEtoSNSInsertPolicy"
DEFAULT_DLQ_RESOURCE_NAME = "SNSDeadLetterQueue"
DEFAULT_DLQ_POLICY_RESOURCE_NAME = "SNStoDLQInsertPolicy"


@dataclass(frozen=True, slots=True)
class BindingConfig:
    """Configuration for one ``cweSns`` event of one function.

    Built by :func:`cwe_sns_binding.normalization.normalize_config`; every
    optional field already carries its default.
    """

    func_name: str
    rule_resource_name: str
    topic_arn: Any
    prefix: str
    topic_resource_name: str
    topic_policy_resource_name: str = DEFAULT_TOPIC_POLICY_RESOURCE_NAME
    dlq_resource_name: str = DEFAULT_DLQ_RESOURCE_NAME
    dlq_policy_resource_name: str = DEFAULT_DLQ_POLICY_RESOURCE_NAME
    dlq_arn: Optional[Any] = None
    dlq_url: Optional[Any] = None
    rule_message: Dict[str, Any] = field(default_factory=dict)
    filter_policy: Dict[str, Any] = field(default_factory=dict)

    @property
    def uses_external_dlq(self) -> bool:
        """Return ``True`` when the caller supplied an existing queue."""

        return bool(self.dlq_arn) or bool(self.dlq_url)

    @property
    def function_logical_name(self) -> str:
        return f"{self.func_name}LambdaFunction"

    def dlq_arn_reference(self) -> Reference:
        if self.dlq_arn:
            return LiteralValue(self.dlq_arn)
        return SymbolicRef(self.dlq_resource_name, "Arn")

    def dlq_queue_reference(self) -> Reference:
        if self.dlq_url:
            return LiteralValue(self.dlq_url)
        return SymbolicRef(self.dlq_resource_name)

    def function_arn_reference(self) -> Reference:
        return SymbolicRef(self.function_logical_name, "Arn")
