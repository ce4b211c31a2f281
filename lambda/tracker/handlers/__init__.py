"""Alexa skill request handlers."""

from tracker.handlers.launch import LaunchRequestHandler
from tracker.handlers.problems import (
    AddProblemHandler,
    DeleteProblemHandler,
    ListProblemsHandler,
    MarkSolvedHandler,
)
from tracker.handlers.progress import StatsHandler
from tracker.handlers.review import TodaysReviewHandler
from tracker.handlers.standard import (
    ExitIntentHandler,
    FallbackIntentHandler,
    HelpIntentHandler,
    IntentReflectorHandler,
    RepeatHandler,
    SessionEndedRequestHandler,
)

__all__ = [
    "LaunchRequestHandler",
    "TodaysReviewHandler",
    "StatsHandler",
    "AddProblemHandler",
    "MarkSolvedHandler",
    "DeleteProblemHandler",
    "ListProblemsHandler",
    "RepeatHandler",
    "HelpIntentHandler",
    "ExitIntentHandler",
    "SessionEndedRequestHandler",
    "FallbackIntentHandler",
    "IntentReflectorHandler",
]
