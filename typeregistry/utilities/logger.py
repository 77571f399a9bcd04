"""
Logger module for typeregistry.

This module provides a centralized logger that can be imported throughout the typeregistry
package without causing circular import issues.
"""

import logging
import os

# Module-level logger
logger: logging.Logger = logging.getLogger('typeregistry')
logger.setLevel(os.environ.get("TYPEREGISTRY_LOG_LEVEL", "WARNING").upper())  # Default to WARNING level to avoid spam

def set_log_level(level: int | str) -> None:
    """Set the logging level for the module. 
    
    Args:
        level: logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL (or the level name)
    """
    logger.setLevel(level)
