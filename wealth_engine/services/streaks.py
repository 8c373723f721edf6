"""Current win/lose streak from realized trade outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .records import TradeOutcome, as_number


@dataclass(frozen=True)
class StreakSummary:
    current_win_streak: int = 0
    current_lose_streak: int = 0


def compute_streaks(trades: Iterable[TradeOutcome]) -> StreakSummary:
    """Count the run of same-sign outcomes ending at the most recent trade.

    Caller order is not trusted; trades are re-sorted newest first, with later
    entries counting as newer on the same date. A zero P/L is neither a win
    nor a loss and ends any run.
    """

    indexed = sorted(enumerate(trades), key=lambda pair: (pair[1].date, pair[0]), reverse=True)
    newest_first = [trade for _, trade in indexed]
    if not newest_first:
        return StreakSummary()

    leading = as_number(newest_first[0].pnl)
    if leading == 0:
        return StreakSummary()

    winning = leading > 0
    run = 0
    for trade in newest_first:
        pnl = as_number(trade.pnl)
        if (pnl > 0) if winning else (pnl < 0):
            run += 1
        else:
            break
    if winning:
        return StreakSummary(current_win_streak=run)
    return StreakSummary(current_lose_streak=run)


__all__ = ["StreakSummary", "compute_streaks"]
