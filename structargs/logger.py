# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for structargs."""
import logging

logger: logging.Logger = logging.getLogger("structargs")
