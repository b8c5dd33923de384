"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case: one request model in, one response out."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
