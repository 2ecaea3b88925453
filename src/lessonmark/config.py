"""Parse configuration for lessonmark, carried in a ContextVar.

The parser never takes options as arguments. Mixins read the active
ParseConfig with get_parse_config(), so a setting applies to every line
of one parse without being threaded through each detector.

Each thread (and each asyncio task) sees its own value, so concurrent
parses with different settings do not interfere.

Usage:
    # Per call, through the package API
    doc = parse(source, config=ParseConfig(highlight_code=False))

    # Around a bare Parser
    with parse_config_context(ParseConfig(text_transformer=expand_vars)):
        blocks = Parser(source).parse()

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Settings that shape one parse.

    Attributes:
        highlight_code: Lex every fenced code line and store the tokens on
            the FencedCode node. Turn off when the viewer colors code
            client-side and only needs the raw lines.
        text_transformer: Called with each prose line (heading, paragraph,
            quote line, list or checklist item, table cell) before inline
            tokenization; e.g. to expand ``{{course_name}}`` placeholders.
            Code lines are never transformed.

    """

    highlight_code: bool = True
    text_transformer: Callable[[str], str] | None = None

    @classmethod
    def from_dict(cls, settings: dict[str, Any]) -> "ParseConfig":
        """Build a config from a settings mapping (course manifest, YAML).

        Keys that are not ParseConfig fields are ignored, so a manifest can
        hold unrelated settings next to the parser's.

        Example:
            >>> ParseConfig.from_dict({"highlight_code": False, "theme": "dark"})
            ParseConfig(highlight_code=False, text_transformer=None)

        """
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in settings.items() if key in known})

    def with_changes(self, **changes: Any) -> "ParseConfig":
        """Copy of this config with some fields replaced."""
        return replace(self, **changes)


_DEFAULT_CONFIG = ParseConfig()

_active_config: ContextVar[ParseConfig] = ContextVar("lessonmark_parse_config", default=_DEFAULT_CONFIG)


def get_parse_config() -> ParseConfig:
    """The ParseConfig in effect for the current context."""
    return _active_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Make config the active configuration for the current context."""
    _active_config.set(config)


def reset_parse_config() -> None:
    """Return the current context to the default configuration."""
    _active_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[ParseConfig]:
    """Activate config for the body of a ``with`` block.

    Whatever was active before is restored on exit, including when the
    body raises.

    Example:
        >>> with parse_config_context(ParseConfig(highlight_code=False)) as config:
        ...     config.highlight_code
        False

    """
    token = _active_config.set(config)
    try:
        yield config
    finally:
        _active_config.reset(token)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
