"""Policy – FailurePolicyResolver."""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from eventually.errors import UnhandledStrategyError
from eventually.policy.decision import (
    Halt,
    Propagate,
    Rerun,
    Resolution,
    Suppress,
    UseOptions,
    UseStrategy,
    classify_handler_result,
)
from eventually.policy.options import EventuallyOptions, RedirectHandler, without_redirect
from eventually.policy.strategy import ErrorHandlingStrategy

logger = logging.getLogger(__name__)


def _redirected(redirect: RedirectHandler, error: Exception) -> Callable[[], Awaitable[Any]]:
    async def operation() -> Any:
        return await redirect(error)

    return operation


class FailurePolicyResolver:
    """Decide what happens after a round of retries has been exhausted.

    Order of precedence: a ``redirect`` on the options, then the ``fail``
    handler's answer. With neither, the last error propagates.
    """

    async def resolve(
        self,
        error: Exception,
        options: EventuallyOptions,
        operation: Callable[[], Awaitable[Any]],
    ) -> Resolution:
        if options.redirect is not None:
            # fail stays active, so a failing redirect is handled by the same policy
            logger.debug("redirecting after exc=%r", error)
            return Rerun(_redirected(options.redirect, error), without_redirect(options))

        if options.fail is None:
            return Propagate(error)

        decision = classify_handler_result(await options.fail(error))
        if isinstance(decision, UseOptions):
            return self._from_options(decision.options, error, operation)
        return self._from_strategy(decision, error, options, operation)

    @staticmethod
    def _from_options(
        new_options: EventuallyOptions,
        error: Exception,
        operation: Callable[[], Awaitable[Any]],
    ) -> Resolution:
        if new_options.redirect is not None:
            logger.debug("handler redirected after exc=%r", error)
            return Rerun(_redirected(new_options.redirect, error), without_redirect(new_options))
        logger.debug("handler supplied new options after exc=%r", error)
        return Rerun(operation, new_options)

    @staticmethod
    def _from_strategy(
        decision: UseStrategy,
        error: Exception,
        options: EventuallyOptions,
        operation: Callable[[], Awaitable[Any]],
    ) -> Resolution:
        strategy = decision.strategy
        logger.debug("failure strategy=%r exc=%r", strategy, error)
        if strategy == ErrorHandlingStrategy.FAIL:
            return Propagate(error)
        if strategy == ErrorHandlingStrategy.RETRY:
            return Rerun(operation, options)
        if strategy == ErrorHandlingStrategy.HALT:
            return Halt()
        if strategy == ErrorHandlingStrategy.SUPPRESS:
            return Suppress()
        raise UnhandledStrategyError(strategy, error)


__all__ = ["FailurePolicyResolver"]
