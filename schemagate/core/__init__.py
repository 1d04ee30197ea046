# Core module exports
from schemagate.core.config import settings, get_settings, Settings
from schemagate.core.logging import (
    configure_logging,
    get_logger,
    compiler_logger,
    regex_logger,
)
