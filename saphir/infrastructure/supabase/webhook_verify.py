from __future__ import annotations

import hmac
import logging

logger = logging.getLogger(__name__)


def verify_signature(body: bytes, signature_header: str | None, secret: str | None, env: str) -> bool:
    """Check a "sha256=<hex>" HMAC of the raw body. Unsigned calls are accepted only in dev/local without a secret."""
    if not secret:
        if env.lower() in {"dev", "local"}:
            logger.warning("No webhook secret configured; accepting in dev mode")
            return True
        logger.error("Missing webhook secret for signature verification")
        return False

    if not signature_header:
        return False

    try:
        algo, signature = signature_header.split("=", 1)
    except ValueError:
        return False

    if algo.lower() != "sha256":
        return False

    expected = hmac.new(secret.encode("utf-8"), body, "sha256").hexdigest()
    return hmac.compare_digest(expected, signature)
