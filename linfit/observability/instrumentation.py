#!filepath: linfit/observability/instrumentation.py
from __future__ import annotations

from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict

from linfit.observability.metrics import MetricRecorder
from linfit.observability.progress import ProgressReporter
from linfit.observability.timeline_reporter import TimelineReporter
from linfit.observability.timer import Timer


@dataclass
class Instrumentation:
    """
    Timing, metrics and progress for one workflow run.

    Rules:
    1. Only record=True timers land in the timeline
    2. record=False timers only bound a scope, no side effects
    3. Instrumentation itself never logs on the hot path
    """

    enabled: bool = True
    report_every: int = 200

    def __post_init__(self):
        self.progress = ProgressReporter(enabled=self.enabled, every=self.report_every)
        self._timer = Timer(enabled=self.enabled)
        self.metrics = MetricRecorder(enabled=self.enabled)

        # OrderedDict[name, elapsed_seconds]
        self.timeline: Dict[str, float] = OrderedDict()

    def timer(self, name: str, *, record: bool = True):
        """
        Context-manager timer.

        Parameters
        ----------
        name : str
            timeline entry name
        record : bool
            True writes the elapsed time to the timeline
        """
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            inst._timer.start(name)
            try:
                yield
            finally:
                elapsed = inst._timer.end(name)
                if record:
                    inst.timeline[name] = elapsed

        return _ctx()

    def generate_timeline_report(self, title: str):
        TimelineReporter(self.timeline, title).print()
