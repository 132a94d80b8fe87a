"""Lambda permission letting SNS invoke the function."""

from __future__ import annotations

import copy

from ..models import BindingConfig, ResourceGraph


def add_invoke_permission(graph: ResourceGraph, config: BindingConfig) -> None:
    """Grant ``sns.amazonaws.com`` invoke rights scoped to the binding's topic."""

    graph.add(
        f"{config.func_name}InvokeFrom{config.topic_resource_name}",
        "AWS::Lambda::Permission",
        {
            "FunctionName": config.function_arn_reference().to_template(),
            "Action": "lambda:InvokeFunction",
            "Principal": "sns.amazonaws.com",
            "SourceArn": copy.deepcopy(config.topic_arn),
        },
    )
