"""Home Sentry Services"""

from .config import SecurityServiceConfig
from .listeners import StatusListener
from .security_service import SecurityService, resolve_status

__all__ = [
    'SecurityService',
    'SecurityServiceConfig',
    'StatusListener',
    'resolve_status',
]
