from contextlib import contextmanager
import time
from typing import Iterator

from prometheus_client import Counter, Histogram


class BookingMetrics:
    """
    Hotel Booking Metrics Collector

    Tracks request outcomes per operation (get/create/update) and how long
    each use case takes end to end.
    """

    def __init__(self):
        self.booking_requests = Counter(
            'hotel_booking_requests',
            'Total hotel booking requests',
            ['operation', 'result'],  # result: success, a BookingErrorKind value, or error
        )

        self.booking_duration = Histogram(
            'hotel_booking_duration_seconds',
            'Hotel booking use case duration',
            ['operation'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0],
        )

    def record_booking_request(self, *, operation: str, result: str, duration: float):
        self.booking_requests.labels(operation=operation, result=result).inc()
        self.booking_duration.labels(operation=operation).observe(duration)

    @contextmanager
    def track_booking_request(self, *, operation: str) -> Iterator[None]:
        """Record one request; business errors are labelled with their kind"""
        start = time.perf_counter()
        result = 'success'
        try:
            yield
        except Exception as e:
            result = str(getattr(e, 'kind', 'error'))
            raise
        finally:
            self.record_booking_request(
                operation=operation, result=result, duration=time.perf_counter() - start
            )


# Global metrics instance
metrics = BookingMetrics()
