"""Protocol for receiving countdown updates."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rush_runner.domain.models.countdown_update import CountdownUpdate


class CountdownSinkProtocol(Protocol):
    """Protocol for consumers of countdown ticks."""

    async def handle_countdown(self, update: "CountdownUpdate") -> None:
        """Handle one countdown tick.

        Args:
            update: The display values and next session context. When
                ``update.refresh_timetable`` is set, the consumer must redraw the
                schedule for ``update.context.day_type``.
        """
        ...
