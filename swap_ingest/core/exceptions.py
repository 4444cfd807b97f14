"""
Application-level exceptions.

Failures of the swap parsing pipeline. Raised where the failure happens so the
reason can be logged; the parser boundary collapses all of them to None.
"""


class SwapParseError(Exception):
    """Base class: the webhook payload did not yield a transaction."""

    reason = "unparseable"


class MalformedInput(SwapParseError):
    """Payload is not valid JSON or not an array holding an event object."""

    reason = "malformed_input"


class GrammarMismatch(SwapParseError):
    """Description does not match the swap sentence."""

    reason = "grammar_mismatch"


class MissingField(SwapParseError):
    """A required event or transfer attribute is absent or has the wrong type."""

    reason = "missing_field"


class UnresolvableAmount(SwapParseError):
    """A parsed amount has no matching token transfer."""

    reason = "unresolvable_amount"
