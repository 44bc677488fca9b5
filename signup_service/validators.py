"""Email validity capability built on pydantic's ``EmailStr``."""

from __future__ import annotations

import logging

from pydantic import EmailStr, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

_email_adapter: TypeAdapter[EmailStr] = TypeAdapter(EmailStr)


class EmailValidatorAdapter:
    """Report whether an address is syntactically valid; never raises on bad input."""

    def is_valid(self, email: str) -> bool:
        try:
            _email_adapter.validate_python(email)
        except ValidationError:
            logger.debug("rejected malformed email address")
            return False
        return True
