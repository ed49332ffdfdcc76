"""Errors raised by the tax engine."""


class InvalidPolicyError(ValueError):
    """Raised when a caller selects a policy regime the engine does not know."""

    def __init__(self, policy: object):
        self.policy = policy
        super().__init__(f"Unknown tax policy: {policy!r}")
