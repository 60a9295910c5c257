"""Ignore pattern compilation.

Two compilers with different failure policies:

- get_compiled_ignore_patterns: strict, raises on the first invalid
  pattern. Used for ignoreLogPatterns.
- compile_ignore_node_messages: tolerant, logs and skips invalid
  patterns. Used for ignoreNodeMessages.
"""

import re
from collections.abc import Iterable

from kwatch.core.exceptions import PatternCompileError
from kwatch.core.logging import get_logger

logger = get_logger(__name__)


def get_compiled_ignore_patterns(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    """Compile every pattern or fail.

    Args:
        patterns: Regular expressions, in order

    Returns:
        Compiled patterns in input order

    Raises:
        PatternCompileError: On the first pattern that does not compile
    """
    compiled: list[re.Pattern[str]] = []
    for index, pattern in enumerate(patterns):
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            logger.error("Invalid ignore pattern", pattern=pattern, index=index, error=str(e))
            raise PatternCompileError(pattern, reason=str(e), index=index) from e
    return compiled


def compile_ignore_node_messages(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    """Compile node message patterns, dropping the ones that are invalid.

    A bad node message pattern must not keep the watcher from starting,
    so each failure is logged and the pattern is left out.

    Args:
        patterns: Regular expressions, in order

    Returns:
        Compiled valid patterns in input order
    """
    compiled: list[re.Pattern[str]] = []
    for index, pattern in enumerate(patterns):
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            logger.warning(
                "Skipping invalid ignore node message pattern",
                pattern=pattern,
                index=index,
                error=str(e),
            )
    return compiled


__all__ = ["get_compiled_ignore_patterns", "compile_ignore_node_messages"]
