"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One ledger operation behind a pydantic request/response pair.

    Use cases take raw wire values (strings, ints) and turn them into domain
    values, so validation errors surface before a service is called.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
