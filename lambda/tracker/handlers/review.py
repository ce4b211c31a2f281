"""Today's review handler."""

import logging

from ask_sdk_core.utils import is_intent_name

from tracker import data
from tracker.handlers.helpers import RepositoryRequestHandler, get_review_speech

logger = logging.getLogger(__name__)


class TodaysReviewHandler(RepositoryRequestHandler):
    """
    Handler for "What should I review today?".

    Reads the top of the daily recommendation list.
    """

    def can_handle(self, handler_input):
        return is_intent_name("TodaysReviewIntent")(handler_input)

    def handle(self, handler_input):
        logger.info("In TodaysReviewHandler")

        recommendations = self._repository.todays_recommendations()
        logger.info(f"Recommending {[problem.id for problem in recommendations]}")

        speech = get_review_speech(recommendations) + " " + data.REPROMPT_GENERAL
        handler_input.response_builder.speak(speech).ask(data.REPROMPT_GENERAL)
        return handler_input.response_builder.response
