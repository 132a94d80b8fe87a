import jsonschema
import pytest

from cwe_sns_binding.schema import CWE_SNS_EVENT_SCHEMA, validate_event_config


def test_accepts_full_configuration() -> None:
    validate_event_config(
        {
            "ruleResourceName": "MyRule",
            "topicArn": {"Ref": "EventsTopic"},
            "dlqArn": "arn:aws:sqs:us-east-1:1:dlq",
            "dlqUrl": "https://sqs.us-east-1.amazonaws.com/1/dlq",
            "dlqResourceName": "Queue",
            "dlqPolicyResourceName": "QueuePolicy",
            "topicPolicyResourceName": "TopicPolicy",
            "ruleMessage": {"InputPath": "$.detail"},
            "filterPolicy": {"kind": ["created"]},
            "prefix": "svc-",
        }
    )


def test_requires_rule_resource_name() -> None:
    assert CWE_SNS_EVENT_SCHEMA["required"] == ["ruleResourceName"]

    with pytest.raises(jsonschema.ValidationError, match="ruleResourceName"):
        validate_event_config({"topicArn": "arn"})


def test_lists_every_error_with_function_name() -> None:
    with pytest.raises(jsonschema.ValidationError) as excinfo:
        validate_event_config(
            {"ruleResourceName": "MyRule", "filterPolicy": "x", "other": True},
            func_name="processEvent",
        )

    message = excinfo.value.message
    assert "in function [processEvent]" in message
    assert "1. " in message
    assert "2. " in message


def test_rule_resource_name_rejects_objects() -> None:
    with pytest.raises(jsonschema.ValidationError, match="ruleResourceName"):
        validate_event_config({"ruleResourceName": {"Ref": "MyRule"}, "topicArn": "arn"})
