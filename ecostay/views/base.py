"""
View state base.

A view owns the snapshot it renders, its draft inputs and a user-facing
notice. Remote errors are caught here at the operation boundary, logged
and turned into a notice; nothing is retried.

Every load takes a token from a per-channel monotonic counter. When a
newer load on the same channel has started by the time a response
arrives, the older response is dropped instead of overwriting the
newer state.
"""

from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, TypeVar

from ecostay.core.exceptions import AuthenticationError, BaseAppException, ValidationError
from ecostay.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_CHANNEL = "default"


class ViewState:
    name = "view"

    def __init__(self):
        self.loading = False
        self.notice: Optional[str] = None
        self.error: Optional[BaseAppException] = None
        self._sequence: Dict[str, int] = {}

    # ------------------------------------------------------------------
    # Request sequencing
    # ------------------------------------------------------------------

    def begin_request(self, channel: str = DEFAULT_CHANNEL) -> int:
        token = self._sequence.get(channel, 0) + 1
        self._sequence[channel] = token
        return token

    def is_current(self, token: int, channel: str = DEFAULT_CHANNEL) -> bool:
        return self._sequence.get(channel, 0) == token

    # ------------------------------------------------------------------
    # Notices
    # ------------------------------------------------------------------

    def notify(self, message: str) -> None:
        self.notice = message

    def dismiss(self) -> None:
        self.notice = None
        self.error = None

    def report(self, error: BaseAppException, notice: str) -> None:
        """Log a failed operation and surface it to the user."""
        if isinstance(error, (ValidationError, AuthenticationError)):
            logger.info(f"{self.name}: {error.message}", extra={"view": self.name})
            self.notice = error.message
        else:
            logger.error(
                f"{self.name}: {notice}",
                extra={"view": self.name, "error_code": error.error_code.value, "details": error.details},
            )
            self.notice = notice
        self.error = error

    # ------------------------------------------------------------------
    # Operation helpers
    # ------------------------------------------------------------------

    async def _load(
        self,
        fetch: Callable[[], Awaitable[T]],
        failure_notice: str,
        channel: str = DEFAULT_CHANNEL,
        track_loading: bool = True,
    ) -> Tuple[bool, Optional[T]]:
        """
        Run a fetch under a fresh token.

        Returns (True, result) when the result should be applied and
        (False, None) when the fetch failed or was superseded.
        """
        token = self.begin_request(channel)
        if track_loading:
            self.loading = True
        try:
            result = await fetch()
        except BaseAppException as e:
            if self.is_current(token, channel):
                self.report(e, failure_notice)
                if track_loading:
                    self.loading = False
            return False, None

        if not self.is_current(token, channel):
            logger.debug(f"{self.name}: discarding stale response", extra={"view": self.name, "channel": channel})
            return False, None
        if track_loading:
            self.loading = False
        return True, result

    async def _perform(
        self,
        action: Callable[[], Awaitable[Any]],
        failure_notice: str,
        success_notice: Optional[str] = None,
    ) -> bool:
        """Run a mutating action; True when it succeeded."""
        try:
            await action()
        except BaseAppException as e:
            self.report(e, failure_notice)
            return False
        self.error = None
        if success_notice:
            self.notify(success_notice)
        return True
