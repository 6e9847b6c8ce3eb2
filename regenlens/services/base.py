from __future__ import annotations

"""Minimal service base class providing a logger."""

import logging
from regenlens.core.logger import Logger


class BaseService:
    """Base class for service helpers.

    Without an explicit logger, each service logs under the module that
    defines its concrete class.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or Logger.get_logger(type(self).__module__)
