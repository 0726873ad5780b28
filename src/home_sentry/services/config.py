"""Security service configuration."""

import os
from dataclasses import dataclass

ENV_CAT_THRESHOLD = "HOME_SENTRY_CAT_THRESHOLD"


@dataclass
class SecurityServiceConfig:
    """Configuration for SecurityService."""
    # Percent (0-100) passed to the image classifier
    cat_confidence_threshold: float = 50.0

    def __post_init__(self):
        if not 0.0 <= self.cat_confidence_threshold <= 100.0:
            raise ValueError(
                f"cat_confidence_threshold must be between 0 and 100, got {self.cat_confidence_threshold}"
            )

    @classmethod
    def from_env(cls) -> "SecurityServiceConfig":
        """Build config from environment, falling back to defaults."""
        raw = os.environ.get(ENV_CAT_THRESHOLD)
        if raw is None:
            return cls()
        try:
            threshold = float(raw)
        except ValueError:
            raise ValueError(f"{ENV_CAT_THRESHOLD} must be a number, got {raw!r}") from None
        return cls(cat_confidence_threshold=threshold)
