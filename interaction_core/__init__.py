"""
Inactivity tracking engine and its Qt adapters.
"""

from loguru import logger as _logger

from .dispatcher import InteractionDispatcher, SubscriptionHandle, create_dispatcher  # noqa: F401
from .errors import InteractionError, InvalidDurationError  # noqa: F401
from .scheduler import AsyncioScheduler, QtScheduler, Scheduler  # noqa: F401
from .subscription import InteractionSubscription, SubscriptionStatus  # noqa: F401

# Silent until the embedding application calls logger.enable("interaction_core").
_logger.disable(__name__)
