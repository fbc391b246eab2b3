"""Logging setup shared by the API and the workflow services."""

import logging
import re

from app.config import LOG_LEVEL

_CONFIGURED = False

_CREDENTIAL_PATTERN = re.compile(r"(private_key:)([^\s'\",}]+)")


class CredentialRedactingFilter(logging.Filter):
    """Mask marketplace private keys that end up in log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _CREDENTIAL_PATTERN.sub(r"\1***", message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


def setup_logging(level: str = LOG_LEVEL) -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    handler.addFilter(CredentialRedactingFilter())

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level.upper())
    _CONFIGURED = True
