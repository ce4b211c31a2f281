"""
LeetCode Tracker Alexa Skill - Lambda Function.

This module wires the problem repository to DynamoDB and exports the
skill lambda handler. All request handlers are defined in tracker.handlers.
"""

import logging
import os

import boto3
from ask_sdk_core.skill_builder import CustomSkillBuilder
from ask_sdk_dynamodb.adapter import DynamoDbAdapter

from tracker.handlers import (
    AddProblemHandler,
    DeleteProblemHandler,
    ExitIntentHandler,
    FallbackIntentHandler,
    HelpIntentHandler,
    IntentReflectorHandler,
    LaunchRequestHandler,
    ListProblemsHandler,
    MarkSolvedHandler,
    RepeatHandler,
    SessionEndedRequestHandler,
    StatsHandler,
    TodaysReviewHandler,
)
from tracker.interceptors import (
    CacheResponseForRepeatInterceptor,
    CatchAllExceptionHandler,
    ReloadOnNewSessionInterceptor,
    RequestLogger,
    ResponseLogger,
)
from tracker.persistence import DEFAULT_STORAGE_KEY, ProblemStore, fixed_partition_keygen
from tracker.repository import ProblemRepository

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

# DynamoDB table holding the problem collection (configurable via environment variable)
TRACKER_TABLE_NAME = os.environ.get("TRACKER_TABLE_NAME", "LeetCodeTrackerData")

# Partition key value of the single stored item
TRACKER_STORAGE_KEY = os.environ.get("TRACKER_STORAGE_KEY", DEFAULT_STORAGE_KEY)


def create_repository(table_name: str, storage_key: str) -> ProblemRepository:
    """Build the DynamoDB-backed repository used for the process lifetime."""
    persistence_adapter = DynamoDbAdapter(
        table_name=table_name,
        partition_key_name="id",
        attribute_name="problems",
        create_table=False,
        partition_keygen=fixed_partition_keygen(storage_key),
        dynamodb_resource=boto3.resource("dynamodb"),
    )
    return ProblemRepository(ProblemStore(persistence_adapter))


def build_skill(repository: ProblemRepository) -> CustomSkillBuilder:
    """Register handlers and interceptors around a repository."""
    sb = CustomSkillBuilder()

    # Order matters - more specific handlers first
    sb.add_request_handler(LaunchRequestHandler(repository))
    sb.add_request_handler(TodaysReviewHandler(repository))
    sb.add_request_handler(StatsHandler(repository))
    sb.add_request_handler(AddProblemHandler(repository))
    sb.add_request_handler(MarkSolvedHandler(repository))
    sb.add_request_handler(DeleteProblemHandler(repository))
    sb.add_request_handler(ListProblemsHandler(repository))
    sb.add_request_handler(RepeatHandler())
    sb.add_request_handler(HelpIntentHandler())
    sb.add_request_handler(ExitIntentHandler())
    sb.add_request_handler(SessionEndedRequestHandler())
    sb.add_request_handler(FallbackIntentHandler())
    sb.add_request_handler(IntentReflectorHandler())  # Must be last - catches any unhandled intents

    sb.add_exception_handler(CatchAllExceptionHandler())

    sb.add_global_request_interceptor(RequestLogger())
    sb.add_global_request_interceptor(ReloadOnNewSessionInterceptor(repository))
    sb.add_global_response_interceptor(CacheResponseForRepeatInterceptor())
    sb.add_global_response_interceptor(ResponseLogger())

    return sb


repository = create_repository(TRACKER_TABLE_NAME, TRACKER_STORAGE_KEY)

# Expose the lambda handler
lambda_handler = build_skill(repository).lambda_handler()
