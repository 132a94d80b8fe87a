from cwe_sns_binding.builders import DLQ_RETENTION_SECONDS, add_dead_letter_queue


def test_creates_default_queue(graph, make_config) -> None:
    add_dead_letter_queue(graph, make_config())

    assert graph.get("SNSDeadLetterQueue") == {
        "Type": "AWS::SQS::Queue",
        "Properties": {
            "QueueName": "svc-dev-SNSDeadLetterQueue",
            "MessageRetentionPeriod": DLQ_RETENTION_SECONDS,
        },
    }
    assert DLQ_RETENTION_SECONDS == 14 * 24 * 60 * 60


def test_existing_queue_is_reused(graph, make_config) -> None:
    add_dead_letter_queue(graph, make_config("first"))
    first = graph.get("SNSDeadLetterQueue")

    add_dead_letter_queue(graph, make_config("second", prefix="other-"))

    assert graph.get("SNSDeadLetterQueue") is first
    assert first["Properties"]["QueueName"] == "svc-dev-SNSDeadLetterQueue"


def test_external_queue_skips_creation(graph, make_config) -> None:
    before = len(graph)

    add_dead_letter_queue(graph, make_config(dlqArn="arn:aws:sqs:us-east-1:1:dlq"))
    add_dead_letter_queue(graph, make_config(dlqUrl="https://sqs.us-east-1.amazonaws.com/1/dlq"))

    assert len(graph) == before
    assert "SNSDeadLetterQueue" not in graph
