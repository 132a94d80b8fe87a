from __future__ import annotations

from typing import Any, Callable

import pytest

from cwe_sns_binding.models import BindingConfig, ResourceGraph
from cwe_sns_binding.normalization import normalize_config

TOPIC_ARN = "arn:aws:sns:us-east-1:123456789012:events"


@pytest.fixture
def template() -> dict[str, Any]:
    return {
        "Resources": {
            "MyRule": {
                "Type": "AWS::Events::Rule",
                "Properties": {"EventPattern": {"source": ["aws.ec2"]}, "Targets": []},
            }
        }
    }


@pytest.fixture
def graph(template: dict[str, Any]) -> ResourceGraph:
    return ResourceGraph(template)


@pytest.fixture
def make_config() -> Callable[..., BindingConfig]:
    def factory(func_name: str = "processEvent", **overrides: Any) -> BindingConfig:
        raw = {"ruleResourceName": "MyRule", "topicArn": TOPIC_ARN}
        raw.update(overrides)
        return normalize_config(raw, func_name, "dev", "svc")

    return factory
