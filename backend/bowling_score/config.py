import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _canon_prefix(val):
    """
    Normalize API prefix to always be exactly like '/api':
      - defaults to '/api' when unset/empty
      - ensures a single leading slash
      - removes any trailing slash (except for root)
    """
    val = (val or "/api").strip()
    if not val.startswith("/"):
        val = "/" + val
    if len(val) > 1 and val.endswith("/"):
        val = val[:-1]
    return val


def parse_flag(raw_value: str) -> Optional[bool]:
    """Return the boolean spelled by ``raw_value``, or ``None`` if unrecognised."""
    value = raw_value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


def _env_flag(env_var: str, default: bool) -> bool:
    raw_value = os.getenv(env_var)
    if raw_value is None or not raw_value.strip():
        return default

    value = parse_flag(raw_value)
    if value is not None:
        return value

    logger.warning(
        "%s is not a valid boolean (got %r); defaulting to %s",
        env_var,
        raw_value,
        default,
    )
    return default


def _parse_origins(raw_value):
    origins = [o.strip() for o in (raw_value or "").split(",") if o.strip()]
    # Wildcard origins are never accepted, with or without credentials
    if "*" in origins:
        raise ValueError(
            "ALLOWED_ORIGINS cannot include '*' (wildcard). Specify explicit, trusted origins."
        )
    return origins


API_PREFIX = _canon_prefix(os.getenv("API_PREFIX"))

BOWLING_ENFORCE_FRAME_OVERFLOW = _env_flag("BOWLING_ENFORCE_FRAME_OVERFLOW", True)
BOWLING_TENTH_FRAME_ALWAYS_THREE_ROLLS = _env_flag(
    "BOWLING_TENTH_FRAME_ALWAYS_THREE_ROLLS", True
)

ALLOWED_ORIGINS = _parse_origins(os.getenv("ALLOWED_ORIGINS"))
ALLOW_CREDENTIALS = _env_flag("ALLOW_CREDENTIALS", False)
