"""
Minimal benchmark.js style suite.
Calibrates a call count per benchmark, collects timed samples and reports
ops/sec with a relative margin of error.
"""

import time

import numpy as np

MIN_SAMPLES = 5
MIN_SAMPLE_TIME = 0.05  # seconds per sample
MAX_TIME = 5.0          # seconds of sampling per benchmark

# Two-tailed 95% critical values of Student's t, keyed by degrees of freedom
T_TABLE = {
    1: 12.706, 2: 4.303, 3: 3.182, 4: 2.776, 5: 2.571, 6: 2.447,
    7: 2.365, 8: 2.306, 9: 2.262, 10: 2.228, 11: 2.201, 12: 2.179,
    13: 2.16, 14: 2.145, 15: 2.131, 16: 2.12, 17: 2.11, 18: 2.101,
    19: 2.093, 20: 2.086, 21: 2.08, 22: 2.074, 23: 2.069, 24: 2.064,
    25: 2.06, 26: 2.056, 27: 2.052, 28: 2.048, 29: 2.045, 30: 2.042,
}
T_INFINITY = 1.96


def t_critical(df):
    return T_TABLE.get(max(int(round(df)), 1), T_INFINITY)


class Stats:
    """Sample statistics for one benchmark, periods in seconds."""

    def __init__(self, samples=()):
        self.samples = np.asarray(samples, dtype=float)
        size = len(self.samples)
        if size == 0:
            self.mean = self.deviation = self.sem = self.moe = self.rme = 0.0
            return
        self.mean = float(self.samples.mean())
        self.deviation = float(self.samples.std(ddof=1)) if size > 1 else 0.0
        self.sem = float(self.deviation / np.sqrt(size))
        self.moe = self.sem * t_critical(size - 1)
        self.rme = (self.moe / self.mean) * 100 if self.mean else 0.0

    @property
    def hz(self):
        return 1 / self.mean if self.mean else 0.0

    def __len__(self):
        return len(self.samples)


class Benchmark:
    def __init__(self, name, fn):
        self.name = name
        self.fn = fn
        self.count = 1
        self.stats = Stats()

    @property
    def hz(self):
        return self.stats.hz

    def _cycle(self, count):
        fn = self.fn
        start = time.perf_counter()
        for _ in range(count):
            fn()
        return time.perf_counter() - start

    def calibrate(self):
        """Double the call count until one sample is long enough to time."""
        self.count = 1
        while self._cycle(self.count) < MIN_SAMPLE_TIME:
            self.count *= 2
        return self.count

    def run(self):
        self.calibrate()
        periods = []
        start = time.perf_counter()
        while len(periods) < MIN_SAMPLES or time.perf_counter() - start < MAX_TIME:
            periods.append(self._cycle(self.count) / self.count)
        self.stats = Stats(periods)
        return self

    def __str__(self):
        hz = self.hz
        hz_text = f"{hz:,.2f}" if hz < 100 else f"{hz:,.0f}"
        size = len(self.stats)
        runs = "run" if size == 1 else "runs"
        return (f"{self.name} x {hz_text} ops/sec "
                f"±{self.stats.rme:.2f}% ({size} {runs} sampled)")


class Suite:
    """Runs benchmarks one after another, firing cycle/complete callbacks."""

    EVENTS = ("cycle", "complete")

    def __init__(self):
        self.benchmarks = []
        self._listeners = {event: [] for event in self.EVENTS}

    def add(self, name, fn):
        self.benchmarks.append(Benchmark(name, fn))
        return self

    def on(self, event, callback):
        if event not in self._listeners:
            raise ValueError(f"Unknown suite event '{event}'")
        self._listeners[event].append(callback)
        return self

    def _emit(self, event, target):
        for callback in self._listeners[event]:
            callback(target)

    def run(self):
        for bench in self.benchmarks:
            bench.run()
            self._emit("cycle", bench)
        self._emit("complete", self)
        return self

    def fastest(self):
        """The single benchmark with the highest ops/sec, or None."""
        if not self.benchmarks:
            return None
        return max(self.benchmarks, key=lambda bench: bench.hz)
