"""JSON schema for the ``cweSns`` function event, as declared to the host."""

from __future__ import annotations

from typing import Any, Mapping

import jsonschema

_STRING_OR_OBJECT = {"type": ["object", "string"]}

CWE_SNS_EVENT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "ruleResourceName": {"type": "string"},
        "topicArn": _STRING_OR_OBJECT,
        "dlqArn": _STRING_OR_OBJECT,
        "dlqUrl": _STRING_OR_OBJECT,
        "dlqResourceName": {"type": "string"},
        "dlqPolicyResourceName": _STRING_OR_OBJECT,
        "topicPolicyResourceName": {"type": "string"},
        "ruleMessage": _STRING_OR_OBJECT,
        "filterPolicy": {"type": "object"},
        "prefix": {"type": "string"},
    },
    "required": ["ruleResourceName"],
    "additionalProperties": False,
}


def validate_event_config(config: Mapping[str, Any], *, func_name: str | None = None) -> None:
    """Validate one ``cweSns`` mapping against :data:`CWE_SNS_EVENT_SCHEMA`.

    Raises:
        jsonschema.ValidationError: If validation fails. The message lists
            every error found.
    """
    validator = jsonschema.Draft202012Validator(CWE_SNS_EVENT_SCHEMA)
    errors = sorted(validator.iter_errors(config), key=lambda err: [str(p) for p in err.absolute_path])
    if errors:
        where = f" in function [{func_name}]" if func_name else ""
        lines = [f"cweSns event validation failed{where}:"]
        for i, err in enumerate(errors, 1):
            path = ".".join(str(p) for p in err.absolute_path) if err.absolute_path else "(root)"
            lines.append(f"  {i}. {path}: {err.message}")
        raise jsonschema.ValidationError("\n".join(lines))
