"""Turn a raw ``cweSns`` event mapping into a :class:`BindingConfig`."""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Mapping

from ..errors import BindingError
from ..models import (
    DEFAULT_DLQ_POLICY_RESOURCE_NAME,
    DEFAULT_DLQ_RESOURCE_NAME,
    DEFAULT_TOPIC_POLICY_RESOURCE_NAME,
    BindingConfig,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("ruleResourceName", "topicArn")

USAGE = """\
Usage
-----

  functions:
    processEvent:
      handler: handler.handler
      events:
        - cweSns:
            ruleResourceName: string                              #required
            topicArn: string                                      #required
            dlqArn: string                                        #optional
            dlqUrl: string                                        #optional
            dlqResourceName:  string                              #optional
            dlqPolicyResourceName : string                        #optional
            topicPolicyResourceName: string                       #optional
            ruleMessage: Input || InputPath || InputTransformer   #optional
            filterPolicy: Object                                  #optional
            prefix: string                                        #optional
"""


class MissingRequiredFieldError(BindingError):
    """Raised when a binding omits ``ruleResourceName`` or ``topicArn``."""

    def __init__(self, func_name: str, missing: list[str]) -> None:
        self.func_name = func_name
        self.missing = missing
        super().__init__(
            "When creating a cweSns handler, you must define the rule name and topic arn.\n"
            f"In function [{func_name}] missing: {', '.join(missing)}\n\n{USAGE}"
        )


class InvalidFieldTypeError(BindingError):
    """Raised when a binding field has a type the template cannot use."""


def pascal_case(name: str) -> str:
    """Upper-case the first character and keep the rest as written."""

    return name[:1].upper() + name[1:]


def normalize_config(
    raw: Mapping[str, Any],
    func_name: str,
    stage: str,
    service_name: str,
) -> BindingConfig:
    """Validate ``raw`` and return a config with every default filled in."""

    missing = [name for name in REQUIRED_FIELDS if not raw.get(name)]
    if missing:
        raise MissingRequiredFieldError(func_name, missing)

    rule_resource_name = raw["ruleResourceName"]
    if not isinstance(rule_resource_name, str):
        raise InvalidFieldTypeError(
            f"In function [{func_name}] ruleResourceName must be the logical name of the "
            f"rule resource, got {rule_resource_name!r}"
        )

    dlq_arn = raw.get("dlqArn") or None
    dlq_url = raw.get("dlqUrl") or None
    if bool(dlq_arn) != bool(dlq_url):
        logger.warning(
            "Function %s supplies only one of dlqArn/dlqUrl; the other side falls back to %s",
            func_name,
            raw.get("dlqResourceName") or DEFAULT_DLQ_RESOURCE_NAME,
        )

    func_name_pascal = pascal_case(func_name)

    return BindingConfig(
        func_name=func_name_pascal,
        rule_resource_name=rule_resource_name,
        topic_arn=copy.deepcopy(raw["topicArn"]),
        prefix=raw.get("prefix") or f"{service_name}-{stage}-",
        topic_resource_name=f"{func_name_pascal}Topic",
        topic_policy_resource_name=(
            raw.get("topicPolicyResourceName") or DEFAULT_TOPIC_POLICY_RESOURCE_NAME
        ),
        dlq_resource_name=raw.get("dlqResourceName") or DEFAULT_DLQ_RESOURCE_NAME,
        dlq_policy_resource_name=(
            raw.get("dlqPolicyResourceName") or DEFAULT_DLQ_POLICY_RESOURCE_NAME
        ),
        dlq_arn=copy.deepcopy(dlq_arn),
        dlq_url=copy.deepcopy(dlq_url),
        rule_message=_rule_message(raw.get("ruleMessage")),
        filter_policy=copy.deepcopy(dict(raw.get("filterPolicy") or {})),
    )


def _rule_message(value: Any) -> Dict[str, Any]:
    if not value:
        return {}
    if isinstance(value, str):
        return {"Input": value}
    return copy.deepcopy(dict(value))
