"""Ordered application of the resource builders for one binding."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from .builders import (
    add_dead_letter_queue,
    add_invoke_permission,
    add_queue_policy,
    add_rule_target,
    add_topic_policy,
    add_topic_subscription,
)
from .models import BindingConfig, ResourceGraph

logger = logging.getLogger(__name__)

Builder = Callable[[ResourceGraph, BindingConfig], None]


@dataclass(frozen=True, slots=True)
class Stage:
    """A named builder step."""

    name: str
    builder: Builder


# The queue must exist before the policies reference it; the rest run in a
# fixed order so the emitted template is reproducible.
STAGES: tuple[Stage, ...] = (
    Stage("dead_letter_queue", add_dead_letter_queue),
    Stage("topic_policy", add_topic_policy),
    Stage("queue_policy", add_queue_policy),
    Stage("rule_target", add_rule_target),
    Stage("subscription", add_topic_subscription),
    Stage("invoke_permission", add_invoke_permission),
)


class MutationPipeline:
    """Run every stage against a shared graph.

    There is no rollback: a failing stage leaves the graph partially mutated
    and the error propagates to the caller.
    """

    def __init__(self, stages: Sequence[Stage] | None = None) -> None:
        self.stages = tuple(stages) if stages is not None else STAGES

    def apply(self, graph: ResourceGraph, config: BindingConfig) -> ResourceGraph:
        for stage in self.stages:
            logger.debug("Applying %s for %s", stage.name, config.func_name)
            stage.builder(graph, config)
        return graph


__all__ = ["MutationPipeline", "STAGES", "Stage"]
