"""Document templating and multi-format rendering engine."""

# logging is configured before anything else is imported
from docrender.utils.logger import setup_logger

setup_logger()

__version__ = "0.1.0"
