from __future__ import annotations

"""Core data types for tokens, patterns and match results."""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Token:
    """Word token with half-open character offsets into its source text."""
    text: str
    start: int
    end: int


@dataclass(frozen=True)
class Group:
    """Run of textually adjacent selected tokens.

    ``separators`` holds the source text found between consecutive tokens, so
    the literal reproduces the original span exactly.
    """
    tokens: tuple[Token, ...]
    separators: tuple[str, ...] = ()

    @property
    def is_phrase(self) -> bool:
        return len(self.tokens) > 1

    @property
    def kind(self) -> str:
        return "phrase" if self.is_phrase else "term"

    @property
    def literal(self) -> str:
        """Return the exact text the group matches."""
        parts = [self.tokens[0].text]
        for token, separator in zip(self.tokens[1:], self.separators):
            parts.append(separator)
            parts.append(token.text)
        return "".join(parts)

    @property
    def clause(self) -> str:
        """Return the word-boundary anchored regex for the literal."""
        return rf"\b{re.escape(self.literal)}\b"


@dataclass(frozen=True)
class CompiledExpression:
    """Derived match rule: every clause must match somewhere in the text."""
    clauses: tuple[str, ...]

    def to_regex(self) -> str:
        """Render the clauses as one lookahead regex for display or export."""
        return "".join(f"(?=[\\s\\S]*?{clause})" for clause in self.clauses)

    def __str__(self) -> str:
        return " AND ".join(self.clauses)


@dataclass(frozen=True)
class Pattern:
    """Named conjunction of groups."""
    name: str
    groups: tuple[Group, ...]

    @property
    def expression(self) -> CompiledExpression:
        return CompiledExpression(clauses=tuple(group.clause for group in self.groups))


@dataclass(frozen=True)
class Topic:
    """Persisted, named pattern."""
    id: str
    name: str
    pattern: Pattern


@dataclass(frozen=True)
class MatchSpan:
    """Located occurrence of one group's literal in a target text."""
    start: int
    end: int


@dataclass(frozen=True)
class MatchResult:
    """Outcome of evaluating a pattern against a text."""
    matched_groups: dict[int, list[MatchSpan]] = field(default_factory=dict)
    overall_match: bool = False
    error: Exception | None = None

    def spans(self) -> list[MatchSpan]:
        """Return spans from every group ordered by position."""
        collected = [span for spans in self.matched_groups.values() for span in spans]
        return sorted(collected, key=lambda span: (span.start, span.end))
