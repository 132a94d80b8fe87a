"""Mutable view over the ``Resources`` section of a CloudFormation template."""

from __future__ import annotations

from typing import Any, Dict, Iterator, MutableMapping, Optional

from ..errors import BindingError


class ResourceConflictError(BindingError):
    """Raised when a logical name would be reused for a different resource type."""


class ResourceGraph:
    """Wrap a template mapping and edit its resources in place.

    The wrapped template is shared with the caller: every change made through
    the graph is visible in the original document.
    """

    def __init__(self, template: MutableMapping[str, Any]) -> None:
        resources = template.get("Resources")
        if resources is None:
            resources = {}
            template["Resources"] = resources
        self.template = template
        self.resources: MutableMapping[str, Any] = resources

    def __contains__(self, logical_name: object) -> bool:
        return logical_name in self.resources

    def __iter__(self) -> Iterator[str]:
        return iter(self.resources)

    def __len__(self) -> int:
        return len(self.resources)

    def get(self, logical_name: str) -> Optional[Any]:
        return self.resources.get(logical_name)

    def add(
        self,
        logical_name: str,
        resource_type: str,
        properties: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Store a resource under ``logical_name`` and return it.

        An existing resource of the same type is replaced; one of another type
        raises :class:`ResourceConflictError`.
        """

        existing = self.resources.get(logical_name)
        if isinstance(existing, MutableMapping):
            existing_type = existing.get("Type")
            if existing_type and existing_type != resource_type:
                raise ResourceConflictError(
                    f"Resource {logical_name} already exists with type {existing_type}; "
                    f"refusing to replace it with {resource_type}"
                )

        resource = {"Type": resource_type, "Properties": properties}
        self.resources[logical_name] = resource
        return resource
