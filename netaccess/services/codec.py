"""Record codec — JSON payloads for roles, groups and users."""

from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from netaccess.core.exceptions import DecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)


def encode(entity: BaseModel) -> str:
    """Serialize an entity to the record store's string payload."""
    return entity.model_dump_json()


def decode(payload: str, model: Type[ModelT]) -> ModelT:
    """Parse a stored payload into ``model``.

    Raises:
        DecodeError: If the payload is not valid JSON for the model.
    """
    try:
        return model.model_validate_json(payload)
    except ValidationError as e:
        raise DecodeError(f"malformed {model.__name__} record: {e.error_count()} error(s)") from e
