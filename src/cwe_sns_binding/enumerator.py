"""Walk declared functions and apply every ``cweSns`` binding to a template."""

from __future__ import annotations

import json
import logging
from typing import Any, List, MutableMapping, Optional

from .models import BindingConfig, ResourceGraph, ServiceDefinition
from .normalization import normalize_config
from .pipeline import MutationPipeline

logger = logging.getLogger(__name__)

EVENT_KEY = "cweSns"


def binding_of(event: Any) -> Optional[Any]:
    """Return the ``cweSns`` value of an event, or ``None`` for other event kinds.

    An empty mapping counts as a binding.
    """

    if not isinstance(event, dict) or event.get(EVENT_KEY) is None:
        return None
    return event[EVENT_KEY]


class BindingEnumerator:
    """Apply bindings in declaration order, one pipeline run per event."""

    def __init__(
        self,
        *,
        pipeline: MutationPipeline | None = None,
        verbose: bool = False,
    ) -> None:
        self._pipeline = pipeline or MutationPipeline()
        self.verbose = verbose

    def apply(
        self,
        service: ServiceDefinition,
        template: MutableMapping[str, Any],
    ) -> List[BindingConfig]:
        """Mutate ``template`` in place and return the configs that were applied."""

        graph = ResourceGraph(template)
        applied: List[BindingConfig] = []

        for function in service.functions:
            for event in function.events:
                raw = binding_of(event)
                if raw is None:
                    continue

                if self.verbose:
                    logger.info("Adding cweSns event handler [%s]", json.dumps(raw, default=str))

                config = normalize_config(raw, function.name, service.stage, service.name)
                self._pipeline.apply(graph, config)
                applied.append(config)

        return applied


__all__ = ["BindingEnumerator", "EVENT_KEY", "binding_of"]
