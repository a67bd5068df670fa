"""Overlay merge for configuration records."""

import logging
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from .schema import ConfigModel, ParsedConfigModel

logger = logging.getLogger(__name__)

C = TypeVar("C", bound="ConfigModel")


def fill_from_parsed(config: C, parsed: "ParsedConfigModel") -> C:
    """Overlay the options present in ``parsed`` onto ``config``.

    Each option is merged on its own: the parsed value wins when the document
    set it, otherwise the value in ``config`` is kept.

    Args:
        config: The full record to start from, usually the defaults.
        parsed: A sparse record from ``ConfigModel.parse_overlay``.

    Returns:
        A new full record. Neither input is modified.

    Examples:
        >>> from rustw.config import RustwConfig
        >>> defaults = RustwConfig.default()
        >>> overlay = RustwConfig.parse_overlay("port = 9000")
        >>> fill_from_parsed(defaults, overlay).port
        9000
    """
    updates = {name: value for name, value in parsed if value is not None}
    if updates:
        logger.debug("Overriding defaults for: %s", ", ".join(updates))
    return config.model_copy(update=updates)
