"""Reference values emitted into CloudFormation templates."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True, slots=True)
class LiteralValue:
    """An externally supplied identifier (ARN, URL or intrinsic object)."""

    value: Any

    def to_template(self) -> Any:
        return copy.deepcopy(self.value)


@dataclass(frozen=True, slots=True)
class SymbolicRef:
    """A reference to another logical resource, resolved at provisioning time."""

    logical_name: str
    attribute: Optional[str] = None

    def to_template(self) -> dict[str, Any]:
        """Render as ``Ref`` or, when an attribute is named, ``Fn::GetAtt``."""

        if self.attribute is None:
            return {"Ref": self.logical_name}
        return {"Fn::GetAtt": [self.logical_name, self.attribute]}


Reference = Union[LiteralValue, SymbolicRef]
