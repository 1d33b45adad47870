"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One request in, one response out.

    Use cases run inside the request's transaction; a raised domain error
    rolls back every write the use case made.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
