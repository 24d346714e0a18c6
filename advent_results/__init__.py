"""Result store for the dev advent calendar competition."""

from advent_results.errors import CorrectAnswerNotFoundError, InvalidWeekError, ResultStoreError
from advent_results.services.result_store import ResultStore, WriteResult

__all__ = [
    "ResultStore",
    "WriteResult",
    "ResultStoreError",
    "InvalidWeekError",
    "CorrectAnswerNotFoundError",
]
