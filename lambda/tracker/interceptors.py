"""Request and response interceptors for the LeetCode Tracker skill."""

import logging

from ask_sdk_core.dispatch_components import (
    AbstractExceptionHandler,
    AbstractRequestInterceptor,
    AbstractResponseInterceptor,
)

from tracker import data
from tracker.repository import ProblemRepository

logger = logging.getLogger(__name__)


class ReloadOnNewSessionInterceptor(AbstractRequestInterceptor):
    """
    Refresh the repository from the store when a session starts.

    The repository lives for the whole Lambda process, so a warm container
    re-reads the stored snapshot once per conversation.
    """

    def __init__(self, repository: ProblemRepository):
        self._repository = repository

    def process(self, handler_input):
        session = handler_input.request_envelope.session
        if session is not None and session.new:
            logger.info("New session, reloading problems")
            self._repository.reload()


class CacheResponseForRepeatInterceptor(AbstractResponseInterceptor):
    """
    Remember the last spoken response for AMAZON.RepeatIntent.

    Responses without speech (session end) leave the cached one in place.
    """

    def process(self, handler_input, response):
        if response is None or response.output_speech is None:
            return
        session_attr = handler_input.attributes_manager.session_attributes
        session_attr["recent_response"] = response


class RequestLogger(AbstractRequestInterceptor):
    """Log the request type and, for intents, the intent name."""

    def process(self, handler_input):
        request = handler_input.request_envelope.request
        intent = getattr(request, "intent", None)
        if intent is not None:
            logger.info(f"Request {request.object_type}: {intent.name}")
        else:
            logger.info(f"Request {request.object_type}")
        logger.debug(f"Request Envelope: {handler_input.request_envelope}")


class ResponseLogger(AbstractResponseInterceptor):
    """Log outgoing responses."""

    def process(self, handler_input, response):
        logger.info(f"Response: {response}")


class CatchAllExceptionHandler(AbstractExceptionHandler):
    """
    Last resort for errors raised while handling a tracker request.

    The problem collection is left as it was (every change is saved before a
    handler speaks), so the user is only told to try again.
    """

    def can_handle(self, handler_input, exception):
        return True

    def handle(self, handler_input, exception):
        request = handler_input.request_envelope.request
        logger.error(f"Error handling {request.object_type}: {exception}", exc_info=True)

        handler_input.response_builder.speak(data.ERROR_MESSAGE).ask(data.REPROMPT_GENERAL)
        return handler_input.response_builder.response
