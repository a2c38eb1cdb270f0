"""Exception hierarchy for component-verifier."""


class ComponentVerifierError(Exception):
    """Base exception for component-verifier."""


class UnknownScopeError(ComponentVerifierError, ValueError):
    """A scope name that is neither PARAMETERS nor CONNECTIVITY."""

    def __init__(self, scope: object):
        super().__init__(f"Unknown scope <{scope}>")
        self.scope = scope
