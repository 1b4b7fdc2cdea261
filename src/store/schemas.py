from __future__ import annotations

"""Persisted record schema for saved topics."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from src.topics.types import Group, Pattern, Token, Topic


class TokenRecord(BaseModel):
    text: str = Field(min_length=1)
    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_span(self) -> "TokenRecord":
        if self.end <= self.start:
            raise ValueError("token end must be greater than start")
        return self


class GroupRecord(BaseModel):
    tokens: list[TokenRecord] = Field(min_length=1)
    separators: list[str] | None = None

    @model_validator(mode="after")
    def _check_separators(self) -> "GroupRecord":
        if self.separators is not None and len(self.separators) != len(self.tokens) - 1:
            raise ValueError("separators must sit between consecutive tokens")
        return self


class TopicRecord(BaseModel):
    id: str = Field(min_length=1)
    name: str
    groups: list[GroupRecord] = Field(min_length=1)


def topic_to_record(topic: Topic) -> dict[str, Any]:
    """Serialize a topic into its persisted dict form."""
    record = TopicRecord(
        id=topic.id,
        name=topic.name,
        groups=[
            GroupRecord(
                tokens=[
                    TokenRecord(text=token.text, start=token.start, end=token.end)
                    for token in group.tokens
                ],
                separators=list(group.separators),
            )
            for group in topic.pattern.groups
        ],
    )
    return record.model_dump()


def topic_from_record(data: Any) -> Topic:
    """Validate a persisted record and rebuild the topic.

    Records written without separators join their tokens with single spaces.
    Raises pydantic.ValidationError for malformed records.
    """
    record = TopicRecord.model_validate(data)
    groups: list[Group] = []
    for group in record.groups:
        tokens = tuple(Token(text=item.text, start=item.start, end=item.end) for item in group.tokens)
        if group.separators is None:
            gaps = tuple(" " for _ in tokens[1:])
        else:
            gaps = tuple(group.separators)
        groups.append(Group(tokens=tokens, separators=gaps))
    return Topic(
        id=record.id,
        name=record.name,
        pattern=Pattern(name=record.name, groups=tuple(groups)),
    )
