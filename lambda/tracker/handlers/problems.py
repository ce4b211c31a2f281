"""Handlers for adding, solving, deleting and listing problems."""

import logging

from ask_sdk_core.utils import is_intent_name

from tracker import data
from tracker.handlers.helpers import (
    RepositoryRequestHandler,
    get_list_speech,
    get_slot_text,
    parse_difficulty,
    parse_status,
)
from tracker.models import Difficulty, FilterConfig, Pattern, Problem

logger = logging.getLogger(__name__)


class AddProblemHandler(RepositoryRequestHandler):
    """
    Handler for "Add Coin Change as hard".

    Title is required; difficulty defaults to easy and an optional pattern
    slot tags the new problem.
    """

    def can_handle(self, handler_input):
        return is_intent_name("AddProblemIntent")(handler_input)

    def handle(self, handler_input):
        logger.info("In AddProblemHandler")

        title = get_slot_text(handler_input, "title")
        if title is None:
            handler_input.response_builder.speak(data.ASK_TITLE).ask(data.ASK_TITLE)
            return handler_input.response_builder.response

        difficulty = parse_difficulty(get_slot_text(handler_input, "difficulty")) or Difficulty.EASY
        pattern = Pattern.from_name(get_slot_text(handler_input, "pattern"))

        problem = Problem(
            title=title,
            difficulty=difficulty,
            patterns=[pattern] if pattern else [],
        )
        self._repository.add(problem)

        if pattern:
            speech = data.PROBLEM_ADDED_WITH_PATTERN.format(
                title=title, difficulty=difficulty.label, pattern=pattern.value
            )
        else:
            speech = data.PROBLEM_ADDED.format(title=title, difficulty=difficulty.label)

        speech += " " + data.REPROMPT_GENERAL
        handler_input.response_builder.speak(speech).ask(data.REPROMPT_GENERAL)
        return handler_input.response_builder.response


class MarkSolvedHandler(RepositoryRequestHandler):
    """
    Handler for "I solved Two Sum" and "Mark Two Sum as unsolved".

    Solving stamps today's date; unsolving clears it.
    """

    def can_handle(self, handler_input):
        return is_intent_name("MarkSolvedIntent")(handler_input) or is_intent_name(
            "MarkUnsolvedIntent"
        )(handler_input)

    def handle(self, handler_input):
        logger.info("In MarkSolvedHandler")

        solved = is_intent_name("MarkSolvedIntent")(handler_input)
        title = get_slot_text(handler_input, "title")
        if title is None:
            handler_input.response_builder.speak(data.ASK_TITLE).ask(data.ASK_TITLE)
            return handler_input.response_builder.response

        problem = self._repository.find_by_title(title)
        updated = self._repository.set_solved(problem.id, solved) if problem else None

        if updated is None:
            speech = data.PROBLEM_NOT_FOUND.format(title=title)
        elif solved:
            speech = data.PROBLEM_MARKED_SOLVED.format(title=updated.title)
        else:
            speech = data.PROBLEM_MARKED_UNSOLVED.format(title=updated.title)

        speech += " " + data.REPROMPT_GENERAL
        handler_input.response_builder.speak(speech).ask(data.REPROMPT_GENERAL)
        return handler_input.response_builder.response


class DeleteProblemHandler(RepositoryRequestHandler):
    """Handler for "Delete Two Sum"."""

    def can_handle(self, handler_input):
        return is_intent_name("DeleteProblemIntent")(handler_input)

    def handle(self, handler_input):
        logger.info("In DeleteProblemHandler")

        title = get_slot_text(handler_input, "title")
        if title is None:
            handler_input.response_builder.speak(data.ASK_TITLE).ask(data.ASK_TITLE)
            return handler_input.response_builder.response

        problem = self._repository.find_by_title(title)
        if problem is not None and self._repository.delete(problem.id):
            speech = data.PROBLEM_DELETED.format(title=problem.title)
        else:
            speech = data.PROBLEM_NOT_FOUND.format(title=title)

        speech += " " + data.REPROMPT_GENERAL
        handler_input.response_builder.speak(speech).ask(data.REPROMPT_GENERAL)
        return handler_input.response_builder.response


class ListProblemsHandler(RepositoryRequestHandler):
    """
    Handler for "List my unsolved hard problems".

    Optional slots narrow the list by status, difficulty and pattern; the
    result is read in display order.
    """

    def can_handle(self, handler_input):
        return is_intent_name("ListProblemsIntent")(handler_input)

    def handle(self, handler_input):
        logger.info("In ListProblemsHandler")

        status = parse_status(get_slot_text(handler_input, "status"))
        difficulty = parse_difficulty(get_slot_text(handler_input, "difficulty"))
        pattern = Pattern.from_name(get_slot_text(handler_input, "pattern"))

        config = FilterConfig(status=status, difficulty=difficulty, pattern=pattern)
        problems = self._repository.filter_and_sort(config)

        speech = get_list_speech(problems) + " " + data.REPROMPT_GENERAL
        handler_input.response_builder.speak(speech).ask(data.REPROMPT_GENERAL)
        return handler_input.response_builder.response
