"""Host-side description of a service and its functions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

DEFAULT_STAGE = "dev"


@dataclass(slots=True)
class FunctionDefinition:
    """A declared function and its ordered event bindings."""

    name: str
    events: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(slots=True)
class ServiceDefinition:
    """Service-level values read from the host configuration."""

    name: str
    stage: str = DEFAULT_STAGE
    provider: str = "aws"
    functions: List[FunctionDefinition] = field(default_factory=list)

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], *, stage: Optional[str] = None
    ) -> "ServiceDefinition":
        """Build a definition from a Serverless-style service document."""

        service = data.get("service") or ""
        if isinstance(service, Mapping):
            service = service.get("name") or ""

        provider: Mapping[str, Any] = data.get("provider") or {}
        if isinstance(provider, str):
            provider = {"name": provider}

        functions: List[FunctionDefinition] = []
        for name, declaration in (data.get("functions") or {}).items():
            declaration = declaration or {}
            events = [event for event in declaration.get("events") or [] if event]
            functions.append(FunctionDefinition(name=str(name), events=list(events)))

        return cls(
            name=str(service),
            stage=str(stage or provider.get("stage") or DEFAULT_STAGE),
            provider=str(provider.get("name") or ""),
            functions=functions,
        )
