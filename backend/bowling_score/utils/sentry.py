import logging
import os
from importlib import metadata

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

from .. import config

logger = logging.getLogger(__name__)


def _parse_sample_rate(env_var: str, default: float = 0.0) -> float:
    raw_value = os.getenv(env_var)
    if raw_value is None:
        return default

    try:
        value = float(raw_value)
    except ValueError:
        logger.warning(
            "%s is not a valid float (got %r); defaulting to %.2f",
            env_var,
            raw_value,
            default,
        )
        return default

    if value < 0:
        logger.warning("%s cannot be negative; defaulting to %.2f", env_var, default)
        return default

    return value


def _release() -> str | None:
    release = (os.getenv("SENTRY_RELEASE") or "").strip()
    if release:
        return release
    try:
        return f"bowling-score@{metadata.version('bowling-score')}"
    except metadata.PackageNotFoundError:
        # Running from a source checkout that was never installed
        return None


def _tag_scoring_rules() -> None:
    sentry_sdk.set_tag(
        "bowling.enforce_frame_overflow",
        str(config.BOWLING_ENFORCE_FRAME_OVERFLOW).lower(),
    )
    sentry_sdk.set_tag(
        "bowling.tenth_frame_always_three_rolls",
        str(config.BOWLING_TENTH_FRAME_ALWAYS_THREE_ROLLS).lower(),
    )


def init_sentry() -> bool:
    """Initialise Sentry when ``SENTRY_DSN`` is set; return whether it was.

    Events are tagged with the release and the default scoring rules so
    reports from deployments with different rule flags can be told apart.
    """
    dsn = os.getenv("SENTRY_DSN")
    if not dsn:
        logger.info("SENTRY_DSN not provided; skipping Sentry initialization.")
        return False

    environment = (os.getenv("SENTRY_ENVIRONMENT") or "").strip() or None
    release = _release()
    traces_sample_rate = _parse_sample_rate("SENTRY_TRACES_SAMPLE_RATE", default=0.0)
    profiles_sample_rate = _parse_sample_rate(
        "SENTRY_PROFILES_SAMPLE_RATE", default=0.0
    )

    sentry_sdk.init(
        dsn=dsn,
        integrations=[FastApiIntegration()],
        environment=environment,
        release=release,
        traces_sample_rate=traces_sample_rate,
        profiles_sample_rate=profiles_sample_rate,
    )
    _tag_scoring_rules()
    logger.info(
        "Initialized Sentry%s%s",
        f" (environment={environment})" if environment else "",
        f" release={release}" if release else "",
    )
    return True
