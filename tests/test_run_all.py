"""Tests for the results summary runner."""

import subprocess
import sys

import pytest

from compose_bench import run_all

RECORDED = """\
Closure x 14,371 ops/sec ±1.68% (89 runs sampled)
Class with composition x 57,946 ops/sec ±1.94% (85 runs sampled)
Class + Closure x 15,201 ops/sec ±1.25% (90 runs sampled)
Good old classes, who needs composition x 135,803 ops/sec ±1.90% (88 runs sampled)
Good old classes, but we gotta use bind x 61,795 ops/sec ±1.78% (89 runs sampled)
Fastest is Good old classes, who needs composition
"""


class TestParseResults:
    def test_recorded_results(self):
        results, fastest = run_all.parse_results(RECORDED)
        assert len(results) == 5
        assert results["Closure"] == {"hz": 14371.0, "rme": 1.68, "runs": 89}
        assert results["Good old classes, who needs composition"]["hz"] == 135803.0
        assert fastest == "Good old classes, who needs composition"

    def test_decimals_and_single_run(self):
        results, fastest = run_all.parse_results("Slow x 50.25 ops/sec ±0.00% (1 run sampled)\n")
        assert results == {"Slow": {"hz": 50.25, "rme": 0.0, "runs": 1}}
        assert fastest is None

    def test_ignores_noise(self):
        assert run_all.parse_results("Traceback (most recent call last):\n") == ({}, None)


class TestReport:
    def test_summary_relative_to_fastest(self, capsys):
        results, fastest = run_all.parse_results(RECORDED)
        run_all.print_summary(results, fastest)
        out = capsys.readouterr().out
        assert "1.00x" in out
        assert "0.11x" in out  # 14,371 / 135,803
        assert "Fastest: Good old classes, who needs composition" in out

    def test_ascii_chart(self, capsys):
        results, _ = run_all.parse_results(RECORDED)
        run_all.generate_ascii_chart(results)
        out = capsys.readouterr().out
        assert "█" * 40 in out
        assert "135,803 ops/sec" in out

    def test_ascii_chart_empty(self, capsys):
        run_all.generate_ascii_chart({})
        assert "No results to display." in capsys.readouterr().out


class TestRunBenchmark:
    def test_captures_output(self, tmp_path):
        output = run_all.run_benchmark([sys.executable, "-c", "print('Fastest is x')"], tmp_path)
        assert output.strip() == "Fastest is x"

    def test_crashed_child_fails_the_run(self, monkeypatch, capsys, tmp_path):
        crash = [
            sys.executable, "-c",
            "print('Closure x 14,371 ops/sec ±1.68% (89 runs sampled)', flush=True)\n"
            "raise RuntimeError('boom')",
        ]
        assert run_all.run_benchmark(crash, tmp_path) is None
        assert "Error: exited with status 1" in capsys.readouterr().out

        run_benchmark = run_all.run_benchmark
        monkeypatch.setattr(run_all, "run_benchmark", lambda cmd, cwd: run_benchmark(crash, cwd))
        assert run_all.main() == 1
        out = capsys.readouterr().out
        assert "FAILED" in out
        assert "SUMMARY TABLE" not in out

    def test_timeout(self, monkeypatch, tmp_path):
        def timeout(*args, **kwargs):
            raise subprocess.TimeoutExpired(cmd="bench", timeout=120)

        monkeypatch.setattr(run_all.subprocess, "run", timeout)
        assert run_all.run_benchmark(["bench"], tmp_path) is None

    def test_missing_command(self, capsys, tmp_path):
        assert run_all.run_benchmark(["definitely-not-a-command-xyz"], tmp_path) is None
        assert "Error:" in capsys.readouterr().out


class TestMain:
    def test_success(self, monkeypatch, capsys):
        monkeypatch.setattr(run_all, "run_benchmark", lambda cmd, cwd: RECORDED)
        assert run_all.main() == 0
        out = capsys.readouterr().out
        assert "SUMMARY TABLE" in out
        assert "THROUGHPUT" in out

    @pytest.mark.parametrize("output", [None, "garbage\n"])
    def test_failure(self, monkeypatch, capsys, output):
        monkeypatch.setattr(run_all, "run_benchmark", lambda cmd, cwd: output)
        assert run_all.main() == 1
        assert "FAILED" in capsys.readouterr().out
