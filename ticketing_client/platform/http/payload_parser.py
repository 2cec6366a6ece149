from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from ticketing_client.platform.exception.exceptions import RemoteError
from ticketing_client.platform.logging.loguru_io import Logger


_M = TypeVar('_M', bound=BaseModel)


def parse_payload(model: type[_M], payload: Any) -> _M:
    """Validate a decoded response body; a body that does not fit is a remote fault"""
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        Logger.base.warning(
            f'🧩 [PAYLOAD] {model.__name__} rejected response: {e.error_count()} error(s)'
        )
        raise RemoteError('Malformed response from server', 502) from e
