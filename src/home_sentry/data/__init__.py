"""Home Sentry Data Layer"""

from .repository import SecurityRepository, InMemorySecurityRepository

__all__ = [
    'SecurityRepository',
    'InMemorySecurityRepository',
]
