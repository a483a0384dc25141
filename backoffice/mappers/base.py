"""
Shared plumbing for wire-to-domain mappers
"""

import logging
from typing import Any

from marshmallow import EXCLUDE, Schema, ValidationError

from backoffice.exceptions import PayloadMappingError

logger = logging.getLogger(__name__)


class WireSchema(Schema):
    """Base schema for remote API payloads; unknown keys are ignored"""

    class Meta:
        unknown = EXCLUDE


def load_entity(schema: Schema, payload: Any, entity: str):
    """Load `payload` through `schema`, turning validation failures into PayloadMappingError"""
    try:
        return schema.load(payload)
    except ValidationError as e:
        logger.warning(f"Malformed {entity} payload: {e.messages}")
        raise PayloadMappingError(entity, e.messages) from e
