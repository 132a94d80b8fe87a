"""Append the binding's topic to the targets of an existing event rule."""

from __future__ import annotations

import copy
import json
from typing import Any, List, MutableMapping, Optional

from ..errors import BindingError
from ..models import BindingConfig, ResourceGraph

MAX_RULE_TARGETS = 5


class InvalidRuleResourceError(BindingError):
    """Raised when the named rule is missing or has no ``Properties.Targets`` list."""


class TargetLimitExceededError(BindingError):
    """Raised when the rule already carries the maximum number of targets."""


def add_rule_target(graph: ResourceGraph, config: BindingConfig) -> None:
    """Route the rule to the binding's topic.

    Raises:
        InvalidRuleResourceError: The rule resource is absent or malformed.
        TargetLimitExceededError: The rule already has ``MAX_RULE_TARGETS`` targets.
    """

    name = config.rule_resource_name
    rule = graph.get(name)
    targets = _targets(rule)
    if targets is None:
        raise InvalidRuleResourceError(
            f"Invalid resource {name} for a cwe rule. The resource must be defined and "
            f"contain Properties and Targets. Found {json.dumps(rule, default=str)}"
        )

    if len(targets) >= MAX_RULE_TARGETS:
        raise TargetLimitExceededError(
            f"Maximum of {MAX_RULE_TARGETS} targets reached for {name} rule"
        )

    targets.append(
        {
            "Arn": copy.deepcopy(config.topic_arn),
            "Id": f"ID{config.topic_resource_name}",
            **copy.deepcopy(config.rule_message),
        }
    )


def _targets(rule: Any) -> Optional[List[Any]]:
    if not isinstance(rule, MutableMapping):
        return None
    properties = rule.get("Properties")
    if not isinstance(properties, MutableMapping):
        return None
    targets = properties.get("Targets")
    return targets if isinstance(targets, list) else None
