"""SNS subscription delivering the topic to the function."""

from __future__ import annotations

import copy

from ..models import BindingConfig, ResourceGraph


def add_topic_subscription(graph: ResourceGraph, config: BindingConfig) -> None:
    """Subscribe the function to the topic with the DLQ as redrive target."""

    graph.add(
        f"SubscribeTo{config.topic_resource_name}",
        "AWS::SNS::Subscription",
        {
            "TopicArn": copy.deepcopy(config.topic_arn),
            "Endpoint": config.function_arn_reference().to_template(),
            "Protocol": "lambda",
            "RedrivePolicy": {
                "deadLetterTargetArn": config.dlq_arn_reference().to_template(),
            },
            "FilterPolicy": copy.deepcopy(config.filter_policy),
        },
    )
