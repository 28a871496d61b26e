"""Domain models and the persisted slice table."""

from .assistant import Conversation, Message, MessageRole
from .habit import Habit, HabitCompletion, HabitFrequency
from .persisted import PersistedSlice
from .planner import Event, EventType, Note, TimeBlock, WeeklyGoal
from .task import Task, TaskPriority, TaskStatus

__all__ = [
    "Conversation",
    "Event",
    "EventType",
    "Habit",
    "HabitCompletion",
    "HabitFrequency",
    "Message",
    "MessageRole",
    "Note",
    "PersistedSlice",
    "Task",
    "TaskPriority",
    "TaskStatus",
    "TimeBlock",
    "WeeklyGoal",
]
