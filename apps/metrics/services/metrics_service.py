"""
Daily metrics recording and aggregation.
"""
import logging
from datetime import date, datetime

from django.db.models import F
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from apps.common.exceptions import InvalidInput
from ..models import DailyMetrics, COUNTER_FIELDS

logger = logging.getLogger(__name__)


class MetricsService:
    """Service for the per-day activity counters"""

    @staticmethod
    def today():
        """Current day bucket: the local calendar date in TIME_ZONE"""
        return timezone.localdate()

    @staticmethod
    def record_event(day=None, **increments):
        """
        Increment counters on the day's record, creating the record on first use.

        Args:
            day: Calendar date (defaults to today)
            **increments: counter name -> positive increment

        Raises:
            InvalidInput: Unknown counter or non-positive increment

        Returns:
            DailyMetrics: The refreshed record
        """
        if not increments:
            raise InvalidInput('No counters to increment')
        for field, amount in increments.items():
            if field not in COUNTER_FIELDS:
                raise InvalidInput(f'Unknown metrics counter: {field}')
            if not isinstance(amount, int) or amount <= 0:
                raise InvalidInput(f'Increment for {field} must be a positive integer')

        day = day or MetricsService.today()
        # get_or_create retries the lookup if a concurrent request inserted the day first
        metrics, created = DailyMetrics.objects.get_or_create(date=day)
        if created:
            logger.info(f"Created metrics record for {day.isoformat()}")

        DailyMetrics.objects.filter(pk=metrics.pk).update(
            **{field: F(field) + amount for field, amount in increments.items()}
        )
        metrics.refresh_from_db()
        return metrics

    @staticmethod
    def record_redemption(day=None):
        """A completed redemption counts as one purchase and one redemption"""
        return MetricsService.record_event(day=day, purchases=1, redemptions=1)

    @staticmethod
    def parse_since(since):
        """
        Parse an ISO date or datetime into a local calendar date.

        Raises:
            InvalidInput: If since is missing or unparseable
        """
        if since is None or (isinstance(since, str) and not since.strip()):
            raise InvalidInput('Since parameter is required')

        if isinstance(since, datetime):
            parsed = since
        elif isinstance(since, date):
            return since
        else:
            try:
                parsed = parse_datetime(since.strip())
                if parsed is None:
                    day = parse_date(since.strip())
                    if day is not None:
                        return day
            except ValueError:
                parsed = None
            if parsed is None:
                raise InvalidInput('Invalid date format for since parameter')

        if timezone.is_aware(parsed):
            parsed = timezone.localtime(parsed)
        return parsed.date()

    @staticmethod
    def aggregate_since(since):
        """
        Sum counters over stored days from since (inclusive) to now.

        Returns:
            dict: one total per counter plus 'history', the per-day records in
            ascending date order. Days without a record are simply absent.
        """
        since_day = MetricsService.parse_since(since)
        records = list(
            DailyMetrics.objects.filter(date__gte=since_day, date__lte=MetricsService.today()).order_by('date')
        )

        aggregated = {field: 0 for field in COUNTER_FIELDS}
        for record in records:
            for field, value in record.counters().items():
                aggregated[field] += value

        aggregated['history'] = records
        return aggregated
