"""
Speech text and prompts for the LeetCode Tracker voice skill.

This module contains all strings spoken by the skill, including welcome
messages, review and stats reports, help text and error prompts.
"""

# Skill metadata
SKILL_TITLE = "LeetCode Tracker"

# Number of recommended problems read out loud (of the daily list)
SPOKEN_RECOMMENDATIONS = 3

# Number of titles read out when listing problems
SPOKEN_LIST_LIMIT = 5

# Number of weak/strong patterns mentioned in the stats report
SPOKEN_PATTERN_LIMIT = 2

# ============================================================================
# Welcome and Launch Messages
# ============================================================================

WELCOME_MESSAGE_EMPTY = (
    "Welcome to LeetCode Tracker! You haven't added any problems yet. "
    "Say 'add Two Sum as easy' to get started."
)

WELCOME_MESSAGE = (
    "Welcome back! You've solved {solved} of {total} problems. {streak}"
    "Say 'what should I review today' or 'how am I doing'."
)

STREAK_ACTIVE = "You're on a {days} day streak. "

STREAK_NONE = "Solve a problem today to start a streak. "

# ============================================================================
# Today's Review
# ============================================================================

REVIEW_INTRO = "Here's what to review today: "

REVIEW_ITEM = "{title}, {difficulty}"

REVIEW_EMPTY = "You're all caught up!"

# ============================================================================
# Stats
# ============================================================================

STATS_REPORT = (
    "You have {total} problems. {solved} solved and {unsolved} unsolved. "
    "Your solve rate is {percentage} percent. "
)

STATS_STREAK = "Your current streak is {days} {unit}. "

STATS_WEAK_PATTERNS = "Weak patterns: {patterns}. "

STATS_STRONG_PATTERNS = "Strong patterns: {patterns}. "

STATS_NO_DATA = "No data yet. Solve some problems to see stats."

# ============================================================================
# Problem Management
# ============================================================================

PROBLEM_ADDED = "Added {title} as {difficulty}."

PROBLEM_ADDED_WITH_PATTERN = "Added {title} as {difficulty}, tagged {pattern}."

ASK_TITLE = "What's the name of the problem?"

PROBLEM_MARKED_SOLVED = "Nice work! Marked {title} as solved."

PROBLEM_MARKED_UNSOLVED = "Marked {title} as not solved yet."

PROBLEM_DELETED = "Deleted {title}."

PROBLEM_NOT_FOUND = "I couldn't find a problem called {title}."

LIST_INTRO = "I found {count} {unit}: "

LIST_MORE = " and {count} more."

LIST_EMPTY = "No problems match."

# ============================================================================
# Help Messages
# ============================================================================

HELP_MESSAGE = (
    "I can track your coding practice. "
    "Say 'add Coin Change as hard' to add a problem, "
    "'I solved Two Sum' to mark it solved, "
    "'what should I review today' for recommendations, "
    "or 'how am I doing' for your stats. "
    "What would you like to do?"
)

# ============================================================================
# Repeat and Reprompt
# ============================================================================

REPROMPT_GENERAL = "What would you like to do next?"

# ============================================================================
# Exit Messages
# ============================================================================

EXIT_SKILL_MESSAGE = "Goodbye! Keep practicing!"

# ============================================================================
# Error Messages
# ============================================================================

FALLBACK_MESSAGE = "Sorry, I didn't get that. Say 'help' if you're stuck."

ERROR_MESSAGE = "Sorry, something went wrong. Please try again."

# ============================================================================
# Helpers
# ============================================================================


def plural(count: int, singular: str, plural_form: str | None = None) -> str:
    """Pick the singular or plural unit for a count."""
    if count == 1:
        return singular
    return plural_form or singular + "s"
