"""
Tests for the Result envelope, Timer and Backend protocol.
"""

import dataclasses

import pytest

from pyinfer.core.compute.timing import Timer, timed
from pyinfer.core.protocols import Backend
from pyinfer.core.result import Result
from pyinfer.bootstrap.backends.cpu import CPUBootstrapBackend


class TestResult:

    def test_frozen(self):
        r = Result(params={"a": 1}, info={}, timing=None, backend_name="cpu_test")
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.backend_name = "other"

    def test_default_warnings(self):
        r = Result(params=None, info={}, timing=None, backend_name="cpu_test")
        assert r.warnings == ()

    def test_has_warning(self):
        r = Result(
            params=None, info={}, timing=None, backend_name="cpu_test",
            warnings=("only 5 replicates", "degenerate"),
        )
        assert r.has_warning("replicates")
        assert not r.has_warning("converge")


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("a"):
            pass
        with timer.section("a"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "a"}
        assert result["a"] >= 0.0

    def test_result_before_stop(self):
        with pytest.raises(RuntimeError):
            Timer().result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_timed(self):
        with timed() as timer:
            pass
        assert timer.result()["total_seconds"] >= 0.0


class TestBackendProtocol:

    def test_cpu_backend_satisfies_protocol(self):
        backend = CPUBootstrapBackend()
        assert isinstance(backend, Backend)
        assert backend.name == "cpu_bootstrap"
