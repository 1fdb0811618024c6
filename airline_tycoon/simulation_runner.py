"""Simulation runner for advancing a session many days at a time."""

import logging
from typing import Dict, List, Optional

from .game_session import GameSession
from .logger import JSONLogger, summarize_days
from .utils import format_cost

logger = logging.getLogger(__name__)


class SimulationRunner:
    """Drives a session day by day and keeps a log of each day."""

    def __init__(self, session: GameSession, day_logger: Optional[JSONLogger] = None):
        """
        Initialize simulation runner.

        Args:
            session: Running session to advance
            day_logger: Optional JSON lines sink for each day's summary
        """
        self.session = session
        self.day_logger = day_logger
        self.day_log: List[Dict] = []

    def run(self, max_days: int) -> Dict:
        """
        Advance until the day budget is spent or the session can no longer play.

        Args:
            max_days: Maximum number of days to process

        Returns:
            Final report dictionary
        """
        logger.info(f"Starting run of up to {max_days} days")
        days_completed = 0

        while days_completed < max_days:
            if not self.session.is_running or self.session.is_paused:
                logger.info(f"Run halted after {days_completed} days: session is {self.session.state.value}")
                break

            summary = self.session.process_day()
            entry = summary.to_log_entry()
            self.day_log.append(entry)
            if self.day_logger is not None:
                self.day_logger.log_day(entry)
            days_completed += 1

            if self.session.has_lost:
                logger.warning(f"Airline went bankrupt on day {summary.day}")
                break

        return self._final_report(days_completed)

    def _final_report(self, days_completed: int) -> Dict:
        airline = self.session.player_airline
        totals = summarize_days(self.day_log[-days_completed:] if days_completed else [])
        report = {
            "days_completed": days_completed,
            "current_day": airline.current_day if airline else 0,
            "final_cash": str(airline.cash) if airline else "0",
            "reputation": airline.reputation if airline else 0,
            "total_passengers_carried": airline.total_passengers_carried if airline else 0,
            "net_profit": str(airline.net_profit) if airline else "0",
            "has_won": self.session.has_won,
            "has_lost": self.session.has_lost,
            "state": self.session.state.value,
            "event_breakdown": totals["event_breakdown"],
        }
        if airline:
            logger.info(
                f"Run finished: {days_completed} days, cash {format_cost(airline.cash)}, "
                f"state {report['state']}"
            )
        return report
