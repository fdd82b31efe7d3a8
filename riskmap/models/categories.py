import logging
from enum import Enum
from typing import Any, Type

logger = logging.getLogger(__name__)

def coerce_category(enum_cls: Type[Enum], value: Any) -> Any:
    """
    Known category strings become enum members. Anything else is handed
    back untouched so records from newer data sources still load and the
    display falls back to its neutral color and label.
    """
    try:
        return enum_cls(value)
    except ValueError:
        logger.debug(f"Keeping unrecognized {enum_cls.__name__} value {value!r}")
        return value
