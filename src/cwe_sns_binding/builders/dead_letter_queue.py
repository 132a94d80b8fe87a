"""Shared SQS dead-letter queue for failed SNS deliveries."""

from __future__ import annotations

from ..models import BindingConfig, ResourceGraph

# 14 days, the SQS maximum.
DLQ_RETENTION_SECONDS = 1209600


def add_dead_letter_queue(graph: ResourceGraph, config: BindingConfig) -> None:
    """Create the default DLQ unless an external queue is configured or it already exists."""

    if config.uses_external_dlq or config.dlq_resource_name in graph:
        return

    graph.add(
        config.dlq_resource_name,
        "AWS::SQS::Queue",
        {
            "QueueName": f"{config.prefix}{config.dlq_resource_name}",
            "MessageRetentionPeriod": DLQ_RETENTION_SECONDS,
        },
    )
