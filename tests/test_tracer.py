"""Tests for the tracer module."""

import json
import os

import pytest

from conftest import make_path


class TestSummarize:
    """Tests for object summarization."""

    def test_summary_capped_length(self):
        """Test that summary never exceeds max length."""
        from inkerase.tracer import summarize

        large_dict = {f"key_{i}": f"value_{i}" for i in range(100)}
        assert len(summarize(large_dict, max_len=20)) <= 20

    def test_path_summary(self):
        """Test that paths show their size and attribute names."""
        from inkerase.tracer import summarize

        summary = summarize(make_path((0, 0), (1, 1), (2, 2), stroke="#000"))

        assert "Path" in summary
        assert "coords=3" in summary
        assert "stroke" in summary

    def test_point_summary(self):
        from inkerase.models import Point
        from inkerase.tracer import summarize

        assert summarize(Point(x=1.5, y=-2)) == "(1.5,-2)"

    def test_list_summary(self):
        from inkerase.tracer import summarize

        summary = summarize([1, 2, 3, 4, 5])
        assert "list" in summary
        assert "len=5" in summary

    def test_long_string_summary(self):
        from inkerase.tracer import summarize

        summary = summarize("a" * 1000)
        assert "len=1000" in summary
        assert len(summary) <= 200

    def test_none_summary(self):
        from inkerase.tracer import summarize

        assert summarize(None) == "None"

    def test_erase_shape_summary(self):
        """Test that erase shapes are shown through their repr."""
        from inkerase.erase.shapes import CircleEraser
        from inkerase.models import Point
        from inkerase.tracer import summarize

        assert "CircleEraser" in summarize(CircleEraser(Point(x=0, y=0), 5))


class TestTracerSpan:
    """Tests for tracer span functionality."""

    def test_span_nesting(self, capsys):
        """Test that spans produce start, end and event lines."""
        from inkerase.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=True, level="INFO")
        tracer = get_tracer()

        try:
            with tracer.span("outer", module="test"):
                with tracer.span("inner", module="test"):
                    tracer.event("inside")
        finally:
            configure_tracer(enabled=False)

        lines = capsys.readouterr().err.strip().split("\n")
        assert len(lines) == 5
        assert "    test:inner  inside" in lines[2]

    def test_span_error_logged_and_raised(self, capsys):
        from inkerase.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=True, level="INFO")
        tracer = get_tracer()

        try:
            with pytest.raises(ValueError):
                with tracer.span("failing", module="test"):
                    raise ValueError("boom")
            tracer.event("after")
        finally:
            configure_tracer(enabled=False)

        err = capsys.readouterr().err
        assert "ERROR" in err
        assert "ValueError: boom" in err
        # depth is restored after the failure
        assert err.strip().split("\n")[-1].endswith(" INFO    after")

    def test_tracer_disabled_no_output(self, capsys):
        from inkerase.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=False)
        tracer = get_tracer()

        with tracer.span("test", module="test"):
            tracer.event("should not appear")

        assert capsys.readouterr().err == ""

    def test_level_filtering(self, capsys):
        """Test that DEBUG events are hidden at INFO level."""
        from inkerase.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=True, level="INFO")
        try:
            get_tracer().event("hidden", level="DEBUG")
            get_tracer().event("shown", level="WARN")
        finally:
            configure_tracer(enabled=False)

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_json_and_file_output(self, temp_dir, capsys):
        from inkerase.tracer import configure_tracer, get_tracer

        trace_path = os.path.join(temp_dir, "trace.log")
        configure_tracer(enabled=True, level="DEBUG", file_path=trace_path, json_output=True)
        try:
            get_tracer().event("hello", count=3)
        finally:
            configure_tracer(enabled=False)

        with open(trace_path, encoding="utf-8") as f:
            lines = f.read().strip().split("\n")
        record = json.loads(lines[1])
        assert record["message"] == "hello count=3"
        assert record["meta"] == {"count": "3"}


class TestTraceDecorator:
    """Tests for the @trace decorator."""

    def test_decorator_runs_function(self):
        from inkerase.tracer import configure_tracer, trace

        configure_tracer(enabled=False)

        @trace(label="test_func")
        def my_func(x):
            return x * 2

        assert my_func(5) == 10

    def test_decorator_traces_erase(self, capsys):
        """Test that the erase passes show up as spans when tracing."""
        from inkerase.models import Point
        from inkerase.pipeline import erase
        from inkerase.tracer import configure_tracer

        configure_tracer(enabled=True, level="DEBUG")
        try:
            erase([make_path((0, 0), (100, 0))], [Point(x=50, y=0)], 10)
        finally:
            configure_tracer(enabled=False)

        err = capsys.readouterr().err
        assert "pipeline:erase" in err
        assert "passes:point_erase" in err
        assert "1 -> 2 paths" in err

    def test_decorator_with_exception(self):
        from inkerase.tracer import configure_tracer, trace

        configure_tracer(enabled=False)

        @trace(label="failing_func")
        def failing_func():
            raise ValueError("test error")

        with pytest.raises(ValueError):
            failing_func()

    def test_decorator_shows_pass_arguments(self, capsys):
        """Test that each pass span names the eraser it runs with."""
        from inkerase.models import Point
        from inkerase.pipeline import erase
        from inkerase.tracer import configure_tracer

        configure_tracer(enabled=True)
        try:
            erase(
                [make_path((0, 0), (100, 0))],
                [Point(x=20, y=0), Point(x=60, y=0)],
                10,
            )
        finally:
            configure_tracer(enabled=False)

        start_lines = [
            line for line in capsys.readouterr().err.splitlines()
            if "passes:capsule_erase" in line and "start" in line
        ]
        assert len(start_lines) == 1
        assert "start=(20,0)" in start_lines[0]
        assert "end=(60,0)" in start_lines[0]
        assert "radius=10" in start_lines[0]
