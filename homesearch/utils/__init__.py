"""Utils module -- config and logging."""

from homesearch.utils.config import Capabilities, settings
from homesearch.utils.logger import get_logger

__all__ = ["Capabilities", "settings", "get_logger"]
