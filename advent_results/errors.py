# advent_results/errors.py
from __future__ import annotations


class ResultStoreError(Exception):
    pass


class InvalidWeekError(ResultStoreError, ValueError):
    def __init__(self, week: object) -> None:
        self.week = week
        super().__init__(f"Missing week {week!r} in model.")


class CorrectAnswerNotFoundError(ResultStoreError, LookupError):
    def __init__(self, user_id: str, test_id: int) -> None:
        self.user_id = user_id
        self.test_id = test_id
        super().__init__(f"No correct answer of user {user_id} for test {test_id}")
