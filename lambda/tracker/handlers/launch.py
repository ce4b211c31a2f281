"""Launch request handler."""

import logging

from ask_sdk_core.utils import is_request_type

from tracker import data
from tracker.handlers.helpers import RepositoryRequestHandler, get_streak_text

logger = logging.getLogger(__name__)


class LaunchRequestHandler(RepositoryRequestHandler):
    """
    Handler for skill launch.

    Greets the user with their solved count and current streak, or with
    an onboarding hint when no problems are tracked yet.
    """

    def can_handle(self, handler_input):
        return is_request_type("LaunchRequest")(handler_input)

    def handle(self, handler_input):
        logger.info("In LaunchRequestHandler")

        summary = self._repository.summary()

        if summary.total == 0:
            speech = data.WELCOME_MESSAGE_EMPTY
        else:
            streak = self._repository.current_streak()
            speech = data.WELCOME_MESSAGE.format(
                solved=summary.solved,
                total=summary.total,
                streak=get_streak_text(streak),
            )

        handler_input.response_builder.speak(speech).ask(data.REPROMPT_GENERAL)
        return handler_input.response_builder.response
