import pytest

from cwe_sns_binding.builders import add_dead_letter_queue, add_queue_policy, add_topic_policy
from cwe_sns_binding.models import ResourceConflictError

OTHER_TOPIC = "arn:aws:sns:us-east-1:123456789012:other"


def test_topic_policy_created_with_one_statement(graph, make_config) -> None:
    config = make_config()

    add_topic_policy(graph, config)

    policy = graph.get("CWEtoSNSInsertPolicy")
    assert policy["Type"] == "AWS::SNS::TopicPolicy"
    properties = policy["Properties"]
    assert properties["Topics"] == [config.topic_arn]
    assert properties["PolicyDocument"]["Id"] == "svc-dev-CWEtoSNSInsertPolicy"
    assert properties["PolicyDocument"]["Version"] == "2012-10-17"
    assert properties["PolicyDocument"]["Statement"] == [
        {
            "Sid": "Statement1",
            "Effect": "Allow",
            "Principal": {"Service": ["events.amazonaws.com"]},
            "Action": ["sns:Publish"],
            "Resource": config.topic_arn,
        }
    ]


def test_topic_policy_accumulates_across_functions(graph, make_config) -> None:
    add_topic_policy(graph, make_config("first"))
    add_topic_policy(graph, make_config("second", topicArn=OTHER_TOPIC))
    add_topic_policy(graph, make_config("third"))

    properties = graph.get("CWEtoSNSInsertPolicy")["Properties"]
    statements = properties["PolicyDocument"]["Statement"]
    assert [statement["Sid"] for statement in statements] == [
        "Statement1",
        "Statement2",
        "Statement3",
    ]
    assert statements[1]["Resource"] == OTHER_TOPIC
    assert len(properties["Topics"]) == 3


def test_queue_policy_references_created_queue(graph, make_config) -> None:
    config = make_config()
    add_dead_letter_queue(graph, config)

    add_queue_policy(graph, config)

    policy = graph.get("SNStoDLQInsertPolicy")
    assert policy["Type"] == "AWS::SQS::QueuePolicy"
    properties = policy["Properties"]
    assert properties["Queues"] == [{"Ref": "SNSDeadLetterQueue"}]
    assert properties["PolicyDocument"]["Id"] == "svc-dev-SNStoDLQInsertPolicy"
    assert properties["PolicyDocument"]["Statement"] == [
        {
            "Sid": "Statement1",
            "Effect": "Allow",
            "Principal": {"Service": "sns.amazonaws.com"},
            "Action": "sqs:SendMessage",
            "Resource": {"Fn::GetAtt": ["SNSDeadLetterQueue", "Arn"]},
            "Condition": {"ArnEquals": {"aws:SourceArn": config.topic_arn}},
        }
    ]


def test_queue_policy_uses_literals_when_supplied(graph, make_config) -> None:
    config = make_config(
        dlqArn="arn:aws:sqs:us-east-1:1:dlq",
        dlqUrl="https://sqs.us-east-1.amazonaws.com/1/dlq",
    )

    add_queue_policy(graph, config)

    properties = graph.get("SNStoDLQInsertPolicy")["Properties"]
    assert properties["Queues"] == ["https://sqs.us-east-1.amazonaws.com/1/dlq"]
    assert properties["PolicyDocument"]["Statement"][0]["Resource"] == "arn:aws:sqs:us-east-1:1:dlq"


def test_queue_policy_sids_follow_statement_count(graph, make_config) -> None:
    add_queue_policy(graph, make_config("first"))
    add_queue_policy(graph, make_config("second", topicArn=OTHER_TOPIC))

    properties = graph.get("SNStoDLQInsertPolicy")["Properties"]
    statements = properties["PolicyDocument"]["Statement"]
    assert [statement["Sid"] for statement in statements] == ["Statement1", "Statement2"]
    assert statements[1]["Condition"]["ArnEquals"]["aws:SourceArn"] == OTHER_TOPIC
    assert properties["Queues"] == [{"Ref": "SNSDeadLetterQueue"}] * 2


def test_policy_name_taken_by_other_type_raises(graph, make_config) -> None:
    graph.add("CWEtoSNSInsertPolicy", "AWS::SQS::Queue", {})

    with pytest.raises(ResourceConflictError):
        add_topic_policy(graph, make_config())
