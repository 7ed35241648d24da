"""
Board-ID extraction orchestrator.

Runs the strategy chain in a fixed order against one page, commits to the
first strategy that yields a valid ID and assembles the outcome.
"""

from __future__ import annotations

import time
from typing import Dict, List, Optional, Sequence

import structlog

from ..config.config import ExtractionSettings
from ..errors import NoIdentifierFoundError
from ..observability.metrics import increment
from .deeplink_strategy import DeepLinkStrategy
from .hydration_strategy import HydrationStateStrategy
from .jsonld_strategy import JsonLdStrategy
from .metadata import read_metadata
from .models import BoardResult, ExtractionFailure, ExtractionOutcome, ExtractionSuccess
from .page import PageSnapshot
from .protocols import Strategy
from .react_props_strategy import ReactPropsStrategy
from .regex_strategy import BroadRegexStrategy, RegexStrategy
from .validator import is_valid_identifier

logger = structlog.get_logger(__name__)

LOGIN_WALL_MARKERS = ('name="password"', "sys_login")


def detect_login_wall(html: str) -> bool:
    return any(marker in html for marker in LOGIN_WALL_MARKERS)


def default_strategies(settings: ExtractionSettings) -> Dict[str, Strategy]:
    strategies: List[Strategy] = [
        DeepLinkStrategy(),
        JsonLdStrategy(),
        HydrationStateStrategy(keys=settings.hydration_keys),
        ReactPropsStrategy(),
        RegexStrategy(),
        BroadRegexStrategy(),
    ]
    return {strategy.name: strategy for strategy in strategies}


class BoardIdExtractor:
    """
    Runs board-ID strategies in priority order.

    Strategies that don't support the page variant are skipped. A strategy
    that raises is treated as a miss; its error is logged at debug level and
    never reaches the caller.
    """

    def __init__(
        self,
        settings: Optional[ExtractionSettings] = None,
        strategies: Optional[Sequence[Strategy]] = None,
    ) -> None:
        self.settings = settings or ExtractionSettings()
        self.logger = logger.bind(component="BoardIdExtractor")

        if strategies is None:
            # strategy_order names are checked by ExtractionSettings
            available = default_strategies(self.settings)
            self.strategies: List[Strategy] = [available[name] for name in self.settings.strategy_order]
        else:
            self.strategies = list(strategies)

        self._strategy_metrics: Dict[str, Dict[str, float]] = {
            strategy.name: {"attempts": 0, "successes": 0, "total_time": 0.0} for strategy in self.strategies
        }

    def run_strategy(self, strategy: Strategy, page: PageSnapshot) -> Optional[str]:
        """Run one strategy; errors and candidates that fail validation count as a miss."""
        metrics = self._strategy_metrics[strategy.name]
        metrics["attempts"] += 1
        start_time = time.perf_counter()
        try:
            candidate = strategy.attempt(page, min_length=self.settings.min_id_length)
        except Exception as e:
            self.logger.debug(
                "Strategy failed",
                strategy=strategy.name,
                url=page.url,
                error=str(e),
                error_type=type(e).__name__,
            )
            increment("strategy_attempts_total", labels={"strategy": strategy.name, "result": "error"})
            return None
        finally:
            metrics["total_time"] += time.perf_counter() - start_time

        if not is_valid_identifier(candidate, self.settings.min_id_length):
            if candidate:
                self.logger.debug("Rejected invalid candidate", strategy=strategy.name, url=page.url)
            increment("strategy_attempts_total", labels={"strategy": strategy.name, "result": "miss"})
            return None

        increment("strategy_attempts_total", labels={"strategy": strategy.name, "result": "hit"})
        metrics["successes"] += 1
        return candidate

    def extract(self, page: PageSnapshot) -> ExtractionOutcome:
        """
        Locate the board ID in ``page``.

        Args:
            page: Fetched HTML or a live-page snapshot

        Returns:
            ExtractionSuccess from the first strategy that produced a valid ID,
            otherwise ExtractionFailure carrying whatever metadata the page had
        """
        if detect_login_wall(page.html):
            # Metadata is often still present behind soft walls, so keep going.
            self.logger.warning("Possible login wall detected", url=page.url)

        metadata = read_metadata(page)
        self.logger.debug("Starting strategy chain", url=page.url, live=page.is_live)

        for strategy in self.strategies:
            if not strategy.supports(page):
                continue

            board_id = self.run_strategy(strategy, page)
            if board_id is None:
                continue

            self.logger.info("Board ID found", url=page.url, board_id=board_id, method=strategy.name)
            increment("extractions_total", labels={"status": "success", "method": strategy.name})
            board = BoardResult(
                id=board_id,
                url=page.url,
                name=metadata.title or self.settings.default_board_name,
                thumbnail=metadata.image,
            )
            return ExtractionSuccess(board=board, method=strategy.name, metadata=metadata)

        self.logger.warning("No strategy produced a board ID", url=page.url)
        increment("extractions_total", labels={"status": "failure", "method": "none"})
        return ExtractionFailure(reason=NoIdentifierFoundError.default_message, metadata=metadata)

    def get_metrics(self) -> Dict[str, Dict[str, float]]:
        """Per-strategy attempt counts, success rates and timings."""
        metrics = {}
        for name, raw in self._strategy_metrics.items():
            attempts = raw["attempts"]
            metrics[name] = {
                "attempts": attempts,
                "successes": raw["successes"],
                "success_rate": raw["successes"] / attempts if attempts > 0 else 0.0,
                "total_time": raw["total_time"],
                "avg_time": raw["total_time"] / attempts if attempts > 0 else 0.0,
            }
        return metrics


__all__ = ["BoardIdExtractor", "default_strategies", "detect_login_wall"]
