"""pwcheck custom exceptions."""

from __future__ import annotations

from typing import Optional, Tuple


class PwcheckError(Exception):
    """
    Base class for errors reported to the operator.

    ``label`` prefixes the message on the command line. Subclasses list the
    attributes that locate the problem in ``context_fields`` as
    (attribute, caption) pairs; set ones are appended to the message.
    """

    label = "ERROR"
    context_fields: Tuple[Tuple[str, str], ...] = ()

    def context(self) -> Tuple[Tuple[str, str], ...]:
        """Captions and values of the context attributes that are set."""
        pairs = []
        for attribute, caption in self.context_fields:
            value = getattr(self, attribute, None)
            if value:
                pairs.append((caption, str(value)))
        return tuple(pairs)

    def __str__(self):
        msg = super().__str__()
        for caption, value in self.context():
            msg += f" ({caption}: {value})"
        return msg


class PwcheckConfigError(PwcheckError):
    """Raised when policy configuration is missing or invalid."""

    label = "CONFIG ERROR"
    context_fields = (("config_path", "config"), ("section", "section"))

    def __init__(
        self, message: str, config_path: Optional[str] = None, section: Optional[str] = None
    ):
        super().__init__(message)
        self.config_path = config_path
        self.section = section


class PwcheckInputError(PwcheckError):
    """Raised when a credential export cannot be read or lacks required columns."""

    label = "INPUT ERROR"
    context_fields = (("source", "input"),)

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source
