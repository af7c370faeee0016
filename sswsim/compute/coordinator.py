"""Background execution of SSW computations.

Two independent computation classes, each with its own worker thread:

  - primary: one parameter set at full resolution. At most one runs at a
    time; requests arriving meanwhile overwrite a single pending slot, and
    the pending request is dispatched as soon as the running one finishes.
  - trend: the gyro sweep. Same single-flight discipline, plus a content
    key over the non-gyro parameters, compared against the sweep running
    now or finished last, so an unchanged sweep is not rerun.

Nothing is cancelled. A superseded request is dropped from the pending slot
before it starts; a running computation always finishes and its result is
delivered in completion order. Failures are logged and never escape to the
caller.
"""
import logging
import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class _Slot:
    """Single-flight bookkeeping for one computation class."""

    def __init__(self, name: str):
        self.name = name
        self.busy = False
        self.pending = None
        self.latest = None


class ComputeCoordinator:
    """Coalescing front end for the SSW engine.

    Example:
        >>> pipeline = SSWPipeline()
        >>> coordinator = ComputeCoordinator.for_pipeline(pipeline, on_result=print)
        >>> coordinator.request(SSWParams())
        >>> coordinator.join()
    """

    def __init__(
        self,
        compute_fn: Callable[[Any], Any],
        trend_fn: Optional[Callable[[Any], Any]] = None,
        on_result: Optional[Callable[[Any], None]] = None,
        on_trend: Optional[Callable[[Any], None]] = None,
        on_error: Optional[Callable[[str, Any, BaseException], None]] = None,
        primary_executor: Optional[Executor] = None,
        trend_executor: Optional[Executor] = None,
    ):
        """Initialize the coordinator.

        Args:
            compute_fn: params -> result for the primary computation
            trend_fn: params -> trend points for the gyro sweep
            on_result: Called with each primary result, on the worker thread
            on_trend: Called with each trend sweep, on the worker thread
            on_error: Called with (kind, params, exception) after a failure
            primary_executor: Executor for primary work (default: one thread)
            trend_executor: Executor for trend work (default: one thread)
        """
        self.compute_fn = compute_fn
        self.trend_fn = trend_fn
        self.on_result = on_result
        self.on_trend = on_trend
        self.on_error = on_error

        self._primary_executor = primary_executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="ssw-primary")
        self._trend_executor = trend_executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="ssw-trend")

        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._primary = _Slot("primary")
        self._trend = _Slot("trend")
        self._trend_key = None

    @classmethod
    def for_pipeline(cls, pipeline, **kwargs) -> "ComputeCoordinator":
        return cls(pipeline.compute, pipeline.compute_trend, **kwargs)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def busy(self) -> bool:
        with self._lock:
            return self._primary.busy

    @property
    def trend_busy(self) -> bool:
        with self._lock:
            return self._trend.busy

    @property
    def pending(self):
        with self._lock:
            return self._primary.pending

    @property
    def latest_result(self):
        """Most recent primary result, or None."""
        with self._lock:
            return self._primary.latest

    @property
    def latest_trend(self):
        with self._lock:
            return self._trend.latest

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def request(self, params) -> bool:
        """Ask for a primary computation.

        Returns:
            True if it started now, False if it was parked in the pending slot
        """
        with self._lock:
            if self._primary.busy:
                if self._primary.pending is not None:
                    logger.debug("Dropping superseded primary request")
                self._primary.pending = params
                return False
            self._primary.busy = True

        return self._dispatch(self._primary, self._primary_executor, self._run_primary, params)

    def request_trend(self, params) -> bool:
        """Ask for a gyro sweep.

        Returns:
            True if a sweep started now; False if it was queued, or skipped
            because the non-gyro parameters match the last sweep
        """
        if self.trend_fn is None:
            raise RuntimeError("No trend function configured")

        key = params.trend_key()
        with self._lock:
            # _trend_key belongs to the sweep running now or finished last
            if key == self._trend_key:
                self._trend.pending = None
                logger.debug("Trend parameters unchanged; sweep skipped")
                return False
            if self._trend.busy:
                self._trend.pending = params
                return False
            self._trend_key = key
            self._trend.busy = True

        return self._dispatch(self._trend, self._trend_executor, self._run_trend, params)

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait until both classes are idle with nothing pending.

        Returns:
            False if `timeout` expired first
        """
        with self._idle:
            return self._idle.wait_for(self._all_idle, timeout)

    def shutdown(self, wait: bool = True):
        self._primary_executor.shutdown(wait=wait)
        self._trend_executor.shutdown(wait=wait)

    # ------------------------------------------------------------------
    # Workers
    # ------------------------------------------------------------------

    def _all_idle(self) -> bool:
        return not (self._primary.busy or self._primary.pending is not None or
                    self._trend.busy or self._trend.pending is not None)

    def _dispatch(self, slot, executor, job, params):
        try:
            executor.submit(job, params)
        except Exception:
            logger.exception("Could not dispatch %s computation", slot.name)
            with self._lock:
                slot.busy = False
                slot.pending = None
                if slot is self._trend:
                    self._trend_key = None
                self._idle.notify_all()
            return False
        return True

    def _run_primary(self, params):
        try:
            result = self.compute_fn(params)
        except Exception as exc:
            logger.exception("Primary SSW computation failed")
            self._report_error("primary", params, exc)
        else:
            with self._lock:
                self._primary.latest = result
            self._deliver(self.on_result, result, "primary")
        finally:
            self._finish(self._primary, self._primary_executor, self._run_primary)

    def _run_trend(self, params):
        try:
            points = self.trend_fn(params)
        except Exception as exc:
            logger.exception("Trend sweep failed")
            with self._lock:
                # Let the same parameters be swept again
                if self._trend_key == params.trend_key():
                    self._trend_key = None
            self._report_error("trend", params, exc)
        else:
            with self._lock:
                self._trend.latest = points
            self._deliver(self.on_trend, points, "trend")
        finally:
            self._finish(self._trend, self._trend_executor, self._run_trend)

    def _finish(self, slot, executor, job):
        with self._lock:
            next_params = slot.pending
            slot.pending = None
            if next_params is None:
                slot.busy = False
                self._idle.notify_all()
                return
            if slot is self._trend:
                self._trend_key = next_params.trend_key()
        # Slot stays busy; hand straight over to the queued request
        self._dispatch(slot, executor, job, next_params)

    def _deliver(self, callback, payload, kind):
        if callback is None:
            return
        try:
            callback(payload)
        except Exception:
            logger.exception("%s result callback raised", kind.capitalize())

    def _report_error(self, kind, params, exc):
        if self.on_error is None:
            return
        try:
            self.on_error(kind, params, exc)
        except Exception:
            logger.exception("Error callback raised")
