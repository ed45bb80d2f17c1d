import logging
import os

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

logger = logging.getLogger(__name__)

SAMPLE_RATE_VARS = {
    "traces_sample_rate": "SENTRY_TRACES_SAMPLE_RATE",
    "profiles_sample_rate": "SENTRY_PROFILES_SAMPLE_RATE",
}


def parse_sample_rate(env_var: str, default: float = 0.0) -> float:
    raw_value = os.getenv(env_var)
    if raw_value is None:
        return default
    try:
        value = float(raw_value)
    except ValueError:
        value = -1.0
    if not 0 <= value <= 1:
        logger.warning(
            "%s must be a number between 0 and 1 (got %r); defaulting to %.2f",
            env_var,
            raw_value,
            default,
        )
        return default
    return value


def init_sentry() -> bool:
    """Initialise Sentry when ``SENTRY_DSN`` is set; report whether it was."""

    dsn = os.getenv("SENTRY_DSN")
    if not dsn:
        logger.info("SENTRY_DSN not provided; skipping Sentry initialization.")
        return False

    environment = (os.getenv("SENTRY_ENVIRONMENT") or "").strip() or None
    rates = {key: parse_sample_rate(var) for key, var in SAMPLE_RATE_VARS.items()}
    sentry_sdk.init(
        dsn=dsn,
        integrations=[FastApiIntegration()],
        environment=environment,
        **rates,
    )
    logger.info("Initialized Sentry (environment=%s)", environment)
    return True
