"""Protocol for the periodic countdown trigger."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rush_runner.domain.models.session_context import SessionContext


class CountdownTickerProtocol(Protocol):
    """Protocol for driving the countdown engine on a fixed cadence."""

    @property
    def is_running(self) -> bool:
        """Whether a tick task is currently scheduled."""
        ...

    async def restart(self, context: "SessionContext") -> None:
        """Stop the current ticker (if any) and start ticking for a new context.

        Args:
            context: The session context to tick for.
        """
        ...

    async def stop(self) -> None:
        """Stop ticking."""
        ...
