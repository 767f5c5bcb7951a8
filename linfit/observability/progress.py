#!filepath: linfit/observability/progress.py
from linfit import logs


class ProgressReporter:
    """
    Iteration progress for training loops.

    Reports on every `every`-th iteration and on the last one.
    """

    def __init__(self, enabled: bool = True, every: int = 200):
        self.enabled = enabled
        self.every = max(1, int(every))

    def should_report(self, iteration: int, total: int) -> bool:
        if not self.enabled:
            return False
        return iteration % self.every == 0 or iteration == total - 1

    def start(self, task: str, total: int, unit: str = "iterations"):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task} started total={total} {unit}")

    def update(self, task: str, current: int, total: int, **values: float):
        if not self.enabled:
            return
        extra = " ".join(f"{k}={v:.6f}" for k, v in values.items())
        logs.info(f"[Progress] {task}: {current}/{total} {extra}".rstrip())

    def done(self, task: str):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task} done")
