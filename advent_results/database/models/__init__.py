from .user import User
from .test import Test
from .answers import UserTestCorrectAnswer, UserTestWrongAnswer
from .result import Result

__all__ = [
    "User",
    "Test",
    "UserTestCorrectAnswer",
    "UserTestWrongAnswer",
    "Result",
]
