"""
Common helpers for schemaorg_ld: value classification, naming and logging.
"""

import logging
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level=logging.INFO, log_file: Optional[str] = None):
    # Get the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Check if the root logger already has handlers (avoid adding multiple)
    if not root_logger.handlers:
        if log_file:
            handler = logging.FileHandler(log_file)
        else:
            handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)


from .naming import translate_attribute_name, snake_case_to_lower_camel_case, IRREGULAR_KEYS
from .types import SerializableEntity, ValueKind, value_kind, is_blank, unqualified_name, JSONStruct, JSONValue

__all__ = [
    "setup_logging",
    "translate_attribute_name", "snake_case_to_lower_camel_case", "IRREGULAR_KEYS",
    "SerializableEntity", "ValueKind", "value_kind", "is_blank", "unqualified_name", "JSONStruct", "JSONValue",
]
