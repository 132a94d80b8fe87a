"""Host integration: provider check, schema validation and lifecycle hooks."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, MutableMapping

from .enumerator import BindingEnumerator, binding_of
from .errors import BindingError
from .models import BindingConfig, ServiceDefinition
from .schema import validate_event_config

FINALIZE_HOOK = "aws:package:finalize:mergeCustomProviderResources"


class UnsupportedProviderError(BindingError):
    """Raised when the service is not deployed to AWS."""


class CweSnsPlugin:
    """Bind ``cweSns`` events of a service into its compiled template."""

    def __init__(
        self,
        service: ServiceDefinition,
        template: MutableMapping[str, Any],
        *,
        verbose: bool = False,
        validate: bool = True,
    ) -> None:
        if service.provider != "aws":
            raise UnsupportedProviderError("This plugin must be used with AWS")

        self.service = service
        self.template = template
        self.validate = validate
        self._enumerator = BindingEnumerator(verbose=verbose)
        self.hooks: Dict[str, Callable[[], List[BindingConfig]]] = {
            FINALIZE_HOOK: self.modify_template,
        }

    def modify_template(self) -> List[BindingConfig]:
        """Add the resources for every ``cweSns`` event to :attr:`template`."""

        if self.validate:
            self._validate_events()
        return self._enumerator.apply(self.service, self.template)

    def _validate_events(self) -> None:
        for function in self.service.functions:
            for event in function.events:
                raw = binding_of(event)
                if raw is not None:
                    validate_event_config(raw, func_name=function.name)


__all__ = ["CweSnsPlugin", "FINALIZE_HOOK", "UnsupportedProviderError"]
