"""
Base class for component verifiers.

ComponentVerifier.verify() is the single entry point: it parses the scope,
protects the caller's parameters, dispatches to the hook for the scope and
turns exceptions raised by the hook into an ERROR result.
"""

import logging
from types import MappingProxyType
from typing import Any, Mapping

from .builder import ResultErrorBuilder
from .result import Result, ResultBuilder, Scope, Status


logger = logging.getLogger(__name__)


class ComponentVerifier:
    """
    Verify component parameters against a scope.

    Subclasses override verify_parameters() and/or verify_connectivity().
    A scope without an override reports UNSUPPORTED with an
    UNSUPPORTED_SCOPE error.
    """

    def __init__(self, name: str | None = None):
        self.name = name or type(self).__name__

    def verify(self, scope: Scope | str, parameters: Mapping[str, Any] | None = None) -> Result:
        """
        Verify parameters against scope.

        Args:
            scope: Scope, or its name in any case
            parameters: Parameters to verify; never modified

        Returns:
            Result whose scope equals the requested scope

        Raises:
            UnknownScopeError: If scope is a string naming no scope
        """
        if not isinstance(scope, Scope):
            scope = Scope.from_string(scope)

        params = MappingProxyType(dict(parameters or {}))
        logger.debug("Verifying %s with scope %s (%d parameters)", self.name, scope.name, len(params))

        try:
            if scope is Scope.PARAMETERS:
                result = self.verify_parameters(params)
            else:
                result = self.verify_connectivity(params)
        except Exception as exc:
            logger.warning("Verifier %s failed for scope %s", self.name, scope.name, exc_info=True)
            return ResultBuilder.with_scope(scope).error(
                ResultErrorBuilder.with_exception(exc).build()
            ).build()

        if result.scope is not scope:
            result = Result(scope=scope, status=result.status, errors=result.errors)
        if result.status is Status.ERROR:
            logger.debug("Verifier %s reported %d errors", self.name, len(result.errors))
        return result

    def verify_parameters(self, parameters: Mapping[str, Any]) -> Result:
        return ResultBuilder.unsupported_scope(Scope.PARAMETERS).build()

    def verify_connectivity(self, parameters: Mapping[str, Any]) -> Result:
        return ResultBuilder.unsupported_scope(Scope.CONNECTIVITY).build()
