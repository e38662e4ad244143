"""Portfolio engine orchestrator."""

import asyncio
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from config.settings import Settings, get_settings
from src.core.models import Activity, FilterMode, Investment, PerformancePoint, PortfolioMetrics
from src.data.feeds import ActivitySource, InvestmentFeed, SyntheticOptimizerFeed, TransactionFeed
from src.data.parser import RecordParser
from src.analytics.activity import count_by_mode, filter_activities, merge_activities
from src.analytics.metrics import MetricsAggregator, YieldPolicyTable
from src.analytics.performance import PerformanceSeriesSynthesizer

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class EngineSnapshot:
    """Immutable inputs and derived views of one recomputation."""

    transactions: Tuple[Activity, ...] = ()
    investments: Tuple[Investment, ...] = ()
    activities: Tuple[Activity, ...] = ()
    metrics: PortfolioMetrics = field(default_factory=PortfolioMetrics.empty)
    series: Tuple[PerformancePoint, ...] = ()


class PortfolioEngine:
    """
    Derive the dashboard views from the transaction and investment feeds.

    Each feed refresh parses a new input snapshot and recomputes the views
    depending on it; the previous snapshot is replaced, never patched.
    The activity feed and the metrics are independent pipelines; the
    performance series depends on both and is rebuilt on either refresh.
    """

    def __init__(
        self,
        transaction_feed: Optional[TransactionFeed] = None,
        investment_feed: Optional[InvestmentFeed] = None,
        activity_sources: Optional[Sequence[ActivitySource]] = None,
        settings: Optional[Settings] = None,
        parser: Optional[RecordParser] = None,
        aggregator: Optional[MetricsAggregator] = None,
        synthesizer: Optional[PerformanceSeriesSynthesizer] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the engine.

        Args:
            transaction_feed: Source of raw transaction records
            investment_feed: Source of raw investment records
            activity_sources: Extra activity producers (defaults to the
                synthetic optimizer feed when enabled in settings)
            settings: Application settings
            parser: Record parser
            aggregator: Metrics aggregator (defaults to the settings' APR policies)
            synthesizer: Performance series synthesizer
            clock: Callable returning the reference instant for a recomputation
        """
        self.settings = settings or get_settings()
        self.transaction_feed = transaction_feed
        self.investment_feed = investment_feed
        self.clock = clock or _utcnow

        if activity_sources is None:
            activity_sources = [SyntheticOptimizerFeed()] if self.settings.synthetic_feed_enabled else []
        self.activity_sources: List[ActivitySource] = list(activity_sources)

        self.parser = parser or RecordParser(actor_ref_length=self.settings.actor_ref_length)
        self.aggregator = aggregator or MetricsAggregator(
            YieldPolicyTable.from_aprs(self.settings.apr_policies, self.settings.default_apr)
        )
        self.synthesizer = synthesizer or PerformanceSeriesSynthesizer(
            window_days=self.settings.performance_window_days
        )

        now = self._now()
        self._snapshot = self._with_series(
            replace(EngineSnapshot(), activities=self._merge((), now)),
            now,
        )

    # ========== FEED REFRESH ==========

    async def refresh_transactions(self) -> None:
        """Fetch the transaction feed and recompute the activity feed and series."""
        records = await self._fetch("transactions", self.transaction_feed, "fetch_transactions")
        self.load_transactions(records)

    async def refresh_investments(self) -> None:
        """Fetch the investment feed and recompute metrics and series."""
        records = await self._fetch("investments", self.investment_feed, "fetch_investments")
        self.load_investments(records)

    async def refresh(self) -> None:
        """Refresh both feeds concurrently."""
        await asyncio.gather(self.refresh_transactions(), self.refresh_investments())

    async def _fetch(self, label: str, feed: Any, method: str) -> List[Dict[str, Any]]:
        if feed is None:
            logger.debug(f"No {label} feed configured")
            return []
        try:
            records = await getattr(feed, method)()
        except Exception as e:
            logger.warning(f"Failed to fetch {label}, treating as empty: {e}")
            return []
        if records is None:
            return []
        return list(records)

    # ========== SNAPSHOT RECOMPUTATION ==========

    def load_transactions(self, records: Optional[Sequence[Dict[str, Any]]]) -> None:
        """Replace the transaction input with raw records and recompute."""
        now = self._now()
        transactions = tuple(self.parser.parse_transactions(records))
        snapshot = replace(
            self._snapshot,
            transactions=transactions,
            activities=self._merge(transactions, now),
        )
        self._snapshot = self._with_series(snapshot, now)
        logger.info(f"Loaded {len(transactions)} transactions, feed has {len(snapshot.activities)} activities")

    def load_investments(self, records: Optional[Sequence[Dict[str, Any]]]) -> None:
        """Replace the investment input with raw records and recompute."""
        now = self._now()
        investments = tuple(self.parser.parse_investments(records))
        snapshot = replace(
            self._snapshot,
            investments=investments,
            metrics=self.aggregator.aggregate(investments),
        )
        self._snapshot = self._with_series(snapshot, now)
        logger.info(f"Loaded {len(investments)} investments")

    def load(
        self,
        transactions: Optional[Sequence[Dict[str, Any]]] = None,
        investments: Optional[Sequence[Dict[str, Any]]] = None,
    ) -> None:
        """Replace both inputs with raw records already held by the caller."""
        self.load_transactions(transactions)
        self.load_investments(investments)

    def _now(self) -> datetime:
        now = self.clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now

    def _merge(self, transactions: Tuple[Activity, ...], now: datetime) -> Tuple[Activity, ...]:
        generated: List[Activity] = []
        for source in self.activity_sources:
            try:
                generated.extend(source.get_activities(now))
            except Exception as e:
                logger.warning(f"Activity source {source.name} failed, skipping: {e}")
        return tuple(merge_activities(transactions, generated))

    def _with_series(self, snapshot: EngineSnapshot, now: datetime) -> EngineSnapshot:
        series = self.synthesizer.build(
            snapshot.metrics.total_principal,
            snapshot.transactions,
            today=now.astimezone(timezone.utc).date(),
        )
        return replace(snapshot, series=tuple(series))

    # ========== VIEWS ==========

    @property
    def snapshot(self) -> EngineSnapshot:
        """Latest computed snapshot."""
        return self._snapshot

    def get_merged_activities(self, mode: Union[FilterMode, str] = FilterMode.ALL) -> List[Activity]:
        """
        Get the activity feed, newest first.

        Args:
            mode: "all", "user" or "optimizer"

        Returns:
            Ordered list of activities
        """
        return filter_activities(self._snapshot.activities, mode)

    def get_activity_counts(self) -> Dict[str, int]:
        """Get the number of activities per filter mode."""
        return count_by_mode(self._snapshot.activities)

    def get_portfolio_metrics(self) -> PortfolioMetrics:
        """Get portfolio totals and weighted APR."""
        return self._snapshot.metrics

    def get_performance_series(self) -> List[PerformancePoint]:
        """Get the trailing performance series, oldest day first."""
        return list(self._snapshot.series)
