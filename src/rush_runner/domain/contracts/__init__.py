"""Domain contracts (protocols) shared between application and adapters."""

from rush_runner.domain.contracts.countdown_formatter import CountdownFormatterProtocol
from rush_runner.domain.contracts.countdown_sink import CountdownSinkProtocol
from rush_runner.domain.contracts.countdown_ticker import CountdownTickerProtocol

__all__ = [
    "CountdownFormatterProtocol",
    "CountdownSinkProtocol",
    "CountdownTickerProtocol",
]
