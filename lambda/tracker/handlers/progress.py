"""Stats reporting handler."""

import logging

from ask_sdk_core.utils import is_intent_name

from tracker import data
from tracker.handlers.helpers import RepositoryRequestHandler, get_patterns_text

logger = logging.getLogger(__name__)


class StatsHandler(RepositoryRequestHandler):
    """
    Handler for reporting the user's progress.

    Responds to "How am I doing?" with totals, solve rate, the current
    streak and the weakest and strongest patterns.
    """

    def can_handle(self, handler_input):
        return is_intent_name("StatsIntent")(handler_input)

    def handle(self, handler_input):
        logger.info("In StatsHandler")

        summary = self._repository.summary()

        if summary.total == 0:
            speech = data.STATS_NO_DATA
        else:
            speech = data.STATS_REPORT.format(
                total=summary.total,
                solved=summary.solved,
                unsolved=summary.unsolved,
                percentage=int(summary.solve_rate * 100),
            )

            streak = self._repository.current_streak()
            speech += data.STATS_STREAK.format(days=streak, unit=data.plural(streak, "day"))

            weak = self._repository.weak_patterns()
            if weak:
                speech += data.STATS_WEAK_PATTERNS.format(patterns=get_patterns_text(weak))

            strong = self._repository.strong_patterns()
            if strong:
                speech += data.STATS_STRONG_PATTERNS.format(patterns=get_patterns_text(strong))

        speech += " " + data.REPROMPT_GENERAL
        handler_input.response_builder.speak(speech).ask(data.REPROMPT_GENERAL)
        return handler_input.response_builder.response
