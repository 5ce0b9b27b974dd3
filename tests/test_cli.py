"""
Tests for the command-line entry point.

Core claims:
    - a clean run exits 0 and prints the summary
    - configuration errors exit 2 before any search starts
    - a failed order exits 1 and names the order
    - --show prints the matrix and a cycle
"""

import pytest

import primesum.driver as driver
from primesum.__main__ import main, build_parser, config_from_args
from primesum.errors import ConfigurationError


class TestMain:
    def test_warm_start_run(self, capsys):
        assert main(["--max", "40", "--quiet"]) == 0
        out = capsys.readouterr().out
        assert "15 sizes verified" in out

    def test_fast_run(self, capsys):
        assert main(["--max", "200", "--fast", "--quiet"]) == 0

    def test_verbose_run_reports_ranges(self, capsys):
        assert main(["--max", "20"]) == 0
        out = capsys.readouterr().out
        assert "Calculating primes" in out
        assert "worker 0" in out

    def test_odd_start(self, capsys):
        assert main(["--max", "40", "--start", "13"]) == 2
        assert "even" in capsys.readouterr().err

    def test_too_many_threads(self, capsys):
        assert main(["--max", "40", "--start", "12", "--threads", "7"]) == 2

    def test_missing_max(self, capsys):
        assert main([]) == 2

    def test_divisor_with_fast(self, capsys):
        assert main(["--max", "40", "--fast", "--divisor", "4"]) == 2
        assert "divisor" in capsys.readouterr().err

    def test_failure_names_the_order(self, capsys, monkeypatch):
        monkeypatch.setattr(driver, "find_prime_pair",
                            lambda h, primes: None if h == 15 else (1, 3))
        assert main(["--max", "60", "--fast", "--no-verify", "--quiet"]) == 1
        assert "30" in capsys.readouterr().err

    def test_lenient_failure(self, capsys, monkeypatch):
        monkeypatch.setattr(driver, "find_prime_pair",
                            lambda h, primes: None if h == 15 else (1, 3))
        assert main(["--max", "60", "--fast", "--no-verify", "--lenient", "--quiet"]) == 1
        assert "Failed sizes: 30" in capsys.readouterr().out

    def test_show(self, capsys):
        assert main(["--show", "6"]) == 0
        out = capsys.readouterr().out
        assert "0, 1, 0, 1, 0, 1" in out
        assert "valid" in out


class TestConfigFromArgs:
    def _config(self, *argv):
        return config_from_args(build_parser().parse_args(list(argv)))

    def test_fast_means_closed_form(self):
        assert self._config("--max", "40", "--fast").strategy.name == "closed_form"

    def test_divisor_passed_through(self):
        config = self._config("--max", "40", "--divisor", "4")
        assert config.strategy.name == "warm_start"
        assert config.strategy.divisor == 4

    def test_fast_conflicts_with_strategy(self):
        with pytest.raises(ConfigurationError):
            self._config("--max", "40", "--fast", "--strategy", "cold_restart")

    def test_lenient_and_quiet(self):
        config = self._config("--max", "40", "--lenient", "--quiet", "--no-verify")
        assert not config.strict
        assert not config.verbose
        assert not config.verify
