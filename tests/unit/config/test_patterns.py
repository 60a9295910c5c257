"""Unit tests for ignore pattern compilation."""

import re

import pytest
from structlog.testing import capture_logs

from kwatch.config.patterns import compile_ignore_node_messages, get_compiled_ignore_patterns
from kwatch.core.exceptions import ConfigError, PatternCompileError


class TestGetCompiledIgnorePatterns:
    """Tests for the strict compiler."""

    def test_valid_patterns(self):
        """Test valid patterns compile in order and match."""
        compiled = get_compiled_ignore_patterns(["my-fancy-pod-[0-9]", "leaderelection lost"])

        assert len(compiled) == 2
        assert all(isinstance(p, re.Pattern) for p in compiled)
        assert compiled[0].search("my-fancy-pod-8")
        assert compiled[1].search('controllermanager.go:272] "leaderelection lost"')

    def test_patterns_reject_non_matching(self):
        """Test compiled patterns reject strings that don't match."""
        compiled = get_compiled_ignore_patterns(["my-fancy-pod-[0-9]"])
        assert compiled[0].search("my-fancy-pod-x") is None

    def test_empty_input(self):
        """Test empty input yields an empty list."""
        assert get_compiled_ignore_patterns([]) == []

    def test_invalid_pattern_raises(self):
        """Test an invalid pattern raises PatternCompileError."""
        with pytest.raises(PatternCompileError) as exc_info:
            get_compiled_ignore_patterns(["my-fancy-pod-[.*"])

        error = exc_info.value
        assert error.pattern == "my-fancy-pod-[.*"
        assert error.index == 0
        assert error.reason
        assert isinstance(error, ConfigError)
        assert isinstance(error.__cause__, re.error)

    def test_first_invalid_pattern_reported(self):
        """Test the first failing pattern is the one reported."""
        with pytest.raises(PatternCompileError) as exc_info:
            get_compiled_ignore_patterns(["ok", "(unclosed", "[also-bad"])

        assert exc_info.value.pattern == "(unclosed"
        assert exc_info.value.index == 1

    def test_invalid_pattern_logged(self):
        """Test the failure is logged as an error."""
        with capture_logs() as logs:
            with pytest.raises(PatternCompileError):
                get_compiled_ignore_patterns(["[bad"])

        assert any(
            entry["log_level"] == "error" and entry.get("pattern") == "[bad" for entry in logs
        )


class TestCompileIgnoreNodeMessages:
    """Tests for the tolerant compiler."""

    def test_invalid_pattern_skipped(self):
        """Test invalid patterns are dropped without raising."""
        compiled = compile_ignore_node_messages(
            [".*network not ready.*", "cni plugin not initialized", "[invalid-regex"]
        )

        assert len(compiled) == 2
        assert [p.pattern for p in compiled] == [
            ".*network not ready.*",
            "cni plugin not initialized",
        ]

    def test_only_invalid_pattern(self):
        """Test a list of only invalid patterns yields nothing."""
        assert compile_ignore_node_messages(["[invalid-regex"]) == []

    def test_empty_input(self):
        """Test empty input yields an empty list."""
        assert compile_ignore_node_messages([]) == []

    def test_matching(self):
        """Test compiled node message patterns match as expected."""
        compiled = compile_ignore_node_messages(
            [".*network not ready.*", "cni plugin not initialized", ".*temporary error.*"]
        )

        assert len(compiled) == 3
        assert compiled[0].search("container runtime network not ready: NetworkReady=false")
        assert compiled[1].search("cni plugin not initialized")
        assert compiled[2].search("encountered a temporary error during request")
        assert compiled[0].search("some other message") is None

    def test_skipped_pattern_logged(self):
        """Test each skipped pattern is logged as a warning."""
        with capture_logs() as logs:
            compile_ignore_node_messages(["ok", "[bad", "(bad"])

        warnings = [entry for entry in logs if entry["log_level"] == "warning"]
        assert [entry["pattern"] for entry in warnings] == ["[bad", "(bad"]
        assert [entry["index"] for entry in warnings] == [1, 2]
