"""Standard Alexa intent handlers (Help, Exit, Repeat, Fallback, etc.)."""

import json
import logging

from ask_sdk_core.dispatch_components import AbstractRequestHandler
from ask_sdk_core.serialize import DefaultSerializer
from ask_sdk_core.utils import get_intent_name, is_intent_name, is_request_type
from ask_sdk_model import Response

from tracker import data

logger = logging.getLogger(__name__)


class RepeatHandler(AbstractRequestHandler):
    """Repeat the last response, or offer help if there is none."""

    def can_handle(self, handler_input):
        return is_intent_name("AMAZON.RepeatIntent")(handler_input)

    def handle(self, handler_input):
        logger.info("In RepeatHandler")

        session_attr = handler_input.attributes_manager.session_attributes

        if "recent_response" in session_attr:
            cached_response_str = json.dumps(session_attr["recent_response"])
            return DefaultSerializer().deserialize(cached_response_str, Response)

        handler_input.response_builder.speak(data.HELP_MESSAGE).ask(data.REPROMPT_GENERAL)
        return handler_input.response_builder.response


class HelpIntentHandler(AbstractRequestHandler):
    """Handler for help intent."""

    def can_handle(self, handler_input):
        return is_intent_name("AMAZON.HelpIntent")(handler_input)

    def handle(self, handler_input):
        logger.info("In HelpIntentHandler")

        handler_input.response_builder.speak(data.HELP_MESSAGE).ask(data.REPROMPT_GENERAL)
        return handler_input.response_builder.response


class ExitIntentHandler(AbstractRequestHandler):
    """Handler for Cancel, Stop, and Pause intents."""

    def can_handle(self, handler_input):
        return (
            is_intent_name("AMAZON.CancelIntent")(handler_input)
            or is_intent_name("AMAZON.StopIntent")(handler_input)
            or is_intent_name("AMAZON.PauseIntent")(handler_input)
        )

    def handle(self, handler_input):
        logger.info("In ExitIntentHandler")

        handler_input.response_builder.speak(data.EXIT_SKILL_MESSAGE).set_should_end_session(True)
        return handler_input.response_builder.response


class SessionEndedRequestHandler(AbstractRequestHandler):
    """Handler for session end."""

    def can_handle(self, handler_input):
        return is_request_type("SessionEndedRequest")(handler_input)

    def handle(self, handler_input):
        logger.info("In SessionEndedRequestHandler")
        logger.info(f"Session ended with reason: {handler_input.request_envelope}")
        return handler_input.response_builder.response


class FallbackIntentHandler(AbstractRequestHandler):
    """
    Handler for fallback intent.

    Triggered when Alexa doesn't understand the user's input.
    """

    def can_handle(self, handler_input):
        return is_intent_name("AMAZON.FallbackIntent")(handler_input)

    def handle(self, handler_input):
        logger.info("In FallbackIntentHandler")

        handler_input.response_builder.speak(data.FALLBACK_MESSAGE).ask(data.REPROMPT_GENERAL)
        return handler_input.response_builder.response


class IntentReflectorHandler(AbstractRequestHandler):
    """
    Catch-all for intents no other handler claimed.

    Registered last so that it only sees unhandled intents.
    """

    def can_handle(self, handler_input):
        return is_request_type("IntentRequest")(handler_input)

    def handle(self, handler_input):
        intent_name = get_intent_name(handler_input)
        logger.warning(f"Unhandled intent {intent_name}")

        handler_input.response_builder.speak(data.FALLBACK_MESSAGE).ask(data.REPROMPT_GENERAL)
        return handler_input.response_builder.response
