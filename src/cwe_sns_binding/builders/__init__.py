"""Builders that add or edit single resources in a :class:`ResourceGraph`."""

from .dead_letter_queue import DLQ_RETENTION_SECONDS, add_dead_letter_queue
from .permission import add_invoke_permission
from .policies import add_queue_policy, add_topic_policy
from .rule_targets import (
    MAX_RULE_TARGETS,
    InvalidRuleResourceError,
    TargetLimitExceededError,
    add_rule_target,
)
from .subscription import add_topic_subscription

__all__ = [
    "DLQ_RETENTION_SECONDS",
    "InvalidRuleResourceError",
    "MAX_RULE_TARGETS",
    "TargetLimitExceededError",
    "add_dead_letter_queue",
    "add_invoke_permission",
    "add_queue_policy",
    "add_rule_target",
    "add_topic_policy",
    "add_topic_subscription",
]
