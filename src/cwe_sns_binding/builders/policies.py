"""Accumulating access policies for the topic and the dead-letter queue.

Both policy resources are shared between bindings: the first binding creates
the resource with an empty statement list and every binding, including the
first, appends one attachment entry and one statement.
"""

from __future__ import annotations

import copy
from typing import Any, Dict

from ..models import BindingConfig, ResourceConflictError, ResourceGraph

POLICY_VERSION = "2012-10-17"


def add_topic_policy(graph: ResourceGraph, config: BindingConfig) -> None:
    """Allow the event bus to publish to the binding's topic."""

    properties = _ensure_policy(
        graph,
        config.topic_policy_resource_name,
        "AWS::SNS::TopicPolicy",
        _empty_policy(config.prefix, "CWEtoSNSInsertPolicy", "Topics"),
    )
    properties["Topics"].append(copy.deepcopy(config.topic_arn))
    _append_statement(
        properties,
        {
            "Effect": "Allow",
            "Principal": {"Service": ["events.amazonaws.com"]},
            "Action": ["sns:Publish"],
            "Resource": copy.deepcopy(config.topic_arn),
        },
    )


def add_queue_policy(graph: ResourceGraph, config: BindingConfig) -> None:
    """Allow the binding's topic to send failed deliveries to the dead-letter queue."""

    properties = _ensure_policy(
        graph,
        config.dlq_policy_resource_name,
        "AWS::SQS::QueuePolicy",
        _empty_policy(config.prefix, config.dlq_policy_resource_name, "Queues"),
    )
    properties["Queues"].append(config.dlq_queue_reference().to_template())
    _append_statement(
        properties,
        {
            "Effect": "Allow",
            "Principal": {"Service": "sns.amazonaws.com"},
            "Action": "sqs:SendMessage",
            "Resource": config.dlq_arn_reference().to_template(),
            "Condition": {"ArnEquals": {"aws:SourceArn": copy.deepcopy(config.topic_arn)}},
        },
    )


def _ensure_policy(
    graph: ResourceGraph,
    name: str,
    resource_type: str,
    empty_properties: Dict[str, Any],
) -> Dict[str, Any]:
    existing = graph.get(name)
    if existing is None:
        return graph.add(name, resource_type, empty_properties)["Properties"]
    if existing.get("Type") != resource_type:
        raise ResourceConflictError(
            f"Resource {name} already exists with type {existing.get('Type')}; "
            f"expected {resource_type}"
        )
    return existing["Properties"]


def _empty_policy(prefix: str, policy_id: str, attachment_key: str) -> Dict[str, Any]:
    return {
        "PolicyDocument": {
            "Version": POLICY_VERSION,
            "Id": f"{prefix}{policy_id}",
            "Statement": [],
        },
        attachment_key: [],
    }


def _append_statement(properties: Dict[str, Any], statement: Dict[str, Any]) -> None:
    # Sids follow the current statement count; nothing ever removes statements.
    statements = properties["PolicyDocument"]["Statement"]
    statements.append({"Sid": f"Statement{len(statements) + 1}", **statement})
