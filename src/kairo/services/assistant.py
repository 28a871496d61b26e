"""Canned-response productivity assistant.

Replies are picked by keyword category; there is no model behind it. The
``send_message`` coroutine simulates a network round trip with a delay.
"""

from __future__ import annotations

import asyncio
import random
import re
from typing import Optional

from ..logging_config import get_logger

logger = get_logger(__name__)

SYSTEM_GREETING = "I am Kairo, your productivity assistant. How can I help you today?"
FALLBACK_REPLY = "Sorry, I encountered an error processing your request. Please try again."

# Checked in order; the first category with a matching keyword wins.
KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ("greeting", ("hello", "hi", "hey", "greetings")),
    ("task", ("task", "todo", "to-do", "to do")),
    ("habit", ("habit", "routine", "daily")),
    ("time", ("time", "schedule", "planning", "calendar")),
    ("focus", ("focus", "concentrate", "distraction", "attention")),
    ("motivation", ("motivate", "motivation", "inspired", "procrastinate")),
]

RESPONSES: dict[str, list[str]] = {
    "greeting": [
        "Hello! I'm Kairo, your productivity assistant. How can I help you today?",
        "Hi there! I'm here to help you stay productive. What can I assist you with?",
        "Greetings! I'm your Kairo assistant. How can I make your day more productive?",
    ],
    "task": [
        "I can help you manage your tasks. Would you like me to help you create a new task, "
        "prioritize existing ones, or suggest a task to work on next?",
        "Task management is one of my specialties. I can help you break down complex tasks, "
        "set deadlines, or organize your task list.",
        "For effective task management, consider using the Eisenhower Matrix to categorize "
        "tasks by urgency and importance. Would you like me to explain how it works?",
    ],
    "habit": [
        "Building good habits is key to long-term productivity. What habit are you trying "
        "to develop or maintain?",
        "Habits are formed through consistent repetition. The key is to start small and "
        "build up gradually. What habit are you working on?",
        "For habit building, I recommend the 'habit stacking' technique - attaching a new "
        "habit to an existing one. Would you like some examples?",
    ],
    "time": [
        "Time management is essential for productivity. Have you tried techniques like the "
        "Pomodoro method or time blocking?",
        "To manage your time effectively, consider identifying your most productive hours "
        "and scheduling important tasks during those times.",
        "One effective time management strategy is to plan your day the night before, so "
        "you can hit the ground running in the morning.",
    ],
    "focus": [
        "Improving focus can significantly boost productivity. Try minimizing distractions, "
        "taking regular breaks, and practicing mindfulness.",
        "For better focus, consider the 5-minute rule: commit to just 5 minutes of work on a "
        "task, and often you'll find yourself continuing beyond that.",
        "Deep work requires eliminating distractions. Consider setting aside specific times "
        "for focused work.",
    ],
    "motivation": [
        "Staying motivated can be challenging. Try setting clear, achievable goals and "
        "celebrating small wins along the way.",
        "Motivation often follows action rather than preceding it. Sometimes the best "
        "approach is to just start, even if you don't feel motivated initially.",
        "Consider finding an accountability partner or joining a community with similar "
        "goals to stay motivated and committed.",
    ],
    "default": [
        "I'm here to help with your productivity needs. Could you provide more details about "
        "what you're looking for?",
        "I can assist with task management, habit building, time management, and more. What "
        "specific area would you like help with?",
        "As your productivity assistant, I'm ready to help you achieve your goals. What would "
        "you like to focus on today?",
    ],
}

_PATTERNS = [
    (category, re.compile("|".join(rf"\b{re.escape(word)}" for word in words)))
    for category, words in KEYWORDS
]


def classify_message(message: str) -> str:
    """Return the response category for ``message``.

    Keywords match at the start of a word, so "hi" matches "hi there" but not
    "this".
    """

    lowered = message.lower()
    for category, pattern in _PATTERNS:
        if pattern.search(lowered):
            return category
    return "default"


def generate_title(message: str) -> str:
    """Use the first three words of ``message`` as a conversation title."""

    words = message.split()
    title = " ".join(words[:3])
    if len(words) > 3:
        title += "..."
    return title


class AssistantService:
    """Keyword responder with a simulated request delay."""

    def __init__(self, *, delay: float = 1.0, rng: Optional[random.Random] = None):
        self.delay = delay
        self.rng = rng or random.Random()

    def respond(self, message: str) -> str:
        category = classify_message(message)
        responses = RESPONSES.get(category) or RESPONSES["default"]
        return self.rng.choice(responses)

    async def send_message(self, message: str) -> str:
        """Reply to ``message`` after the configured delay."""

        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            return self.respond(message)
        except Exception:
            logger.exception("Assistant reply failed")
            return FALLBACK_REPLY


__all__ = [
    "AssistantService",
    "FALLBACK_REPLY",
    "SYSTEM_GREETING",
    "classify_message",
    "generate_title",
]
