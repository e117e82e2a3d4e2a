from typing import Callable, Iterable, Type
import sentry_sdk
from sentry_sdk.integrations.aiohttp import AioHttpIntegration
from pydantic import BaseModel
from .config import CONFIG

__all__ = ("find", "parse_into", "init_sentry")


def find[T](predicate: Callable, iterable: Iterable[T]) -> T | None:
    """Finds the first element in an iterable that matches the predicate."""

    for element in iterable:
        if predicate(element):
            return element

    return None

def parse_into[T: BaseModel | dict](data: dict, model: Type[T]) -> T:
    """Parse a dictionary into a model, ignoring keys the model does not declare.

    Args:
        data (dict): The dictionary to parse.
        model (Type[T]): The model to parse the dictionary into.

    Returns:
        T: The model instance.
    """

    if issubclass(model, BaseModel):
        relevant_fields = {field_name: data.get(field_name, data.get(field.alias)) for field_name, field in model.model_fields.items() if field_name in data or field.alias in data}

        return model(**relevant_fields)

    return model(**data)

def init_sentry():
    """Initialize Sentry."""

    if CONFIG.SENTRY_DSN:
        sentry_sdk.init(
            dsn=CONFIG.SENTRY_DSN,
            integrations=[AioHttpIntegration()],
            attach_stacktrace=True
        )
