"""Data models for quiz questions, chat messages and search results."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    """Fetch a key, preferring an exact match and falling back to a case-insensitive one."""
    if key in data:
        return data[key]
    lowered = key.lower()
    for name, value in data.items():
        if isinstance(name, str) and name.lower() == lowered:
            return value
    return None


def _str_field(data: Mapping[str, Any], key: str) -> str:
    value = _lookup(data, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(
            f"field {key!r} must be a string, got {type(value).__name__}"
        )
    return value


def _int_field(data: Mapping[str, Any], key: str) -> int:
    value = _lookup(data, key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(
            f"field {key!r} must be an integer, got {type(value).__name__}"
        )
    return value


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


@dataclass
class Question:
    """A multiple-choice quiz question."""

    question_id: int = 0
    ques: str = ""
    option_a: str = ""
    option_b: str = ""
    option_c: str = ""
    option_d: str = ""
    answer: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Question":
        if data is None:
            return cls()
        data = _require_mapping(data, "question")
        return cls(
            question_id=_int_field(data, "QuestionId"),
            ques=_str_field(data, "Ques"),
            option_a=_str_field(data, "OptionA"),
            option_b=_str_field(data, "OptionB"),
            option_c=_str_field(data, "OptionC"),
            option_d=_str_field(data, "OptionD"),
            answer=_str_field(data, "Answer"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "QuestionId": self.question_id,
            "Ques": self.ques,
            "OptionA": self.option_a,
            "OptionB": self.option_b,
            "OptionC": self.option_c,
            "OptionD": self.option_d,
            "Answer": self.answer,
        }

    def has_empty_fields(self) -> bool:
        """True when the question text, any option or the answer is empty."""
        return not all(
            (
                self.ques,
                self.option_a,
                self.option_b,
                self.option_c,
                self.option_d,
                self.answer,
            )
        )


@dataclass
class QuestionSet:
    """A topic together with its questions."""

    topic: str = ""
    questions: list[Question] = field(default_factory=list)

    @classmethod
    def from_json(cls, text: str) -> "QuestionSet":
        """Parse a JSON document; raises ValueError when it is malformed."""
        data = json.loads(text)
        if data is None:
            return cls()
        data = _require_mapping(data, "question set")
        raw_questions = _lookup(data, "Questions")
        if raw_questions is None:
            raw_questions = []
        if not isinstance(raw_questions, list):
            raise ValueError(
                f"field 'Questions' must be an array, got {type(raw_questions).__name__}"
            )
        return cls(
            topic=_str_field(data, "Topic"),
            questions=[Question.from_dict(item) for item in raw_questions],
        )


@dataclass
class Message:
    """A chat message with a role and its content."""

    role: str = ""
    content: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Message":
        if data is None:
            return cls()
        data = _require_mapping(data, "message")
        return cls(role=_str_field(data, "role"), content=_str_field(data, "content"))

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class RequestBody:
    """Body of a chat-completion request."""

    messages: list[Message] = field(default_factory=list)
    model: str = "llama3-8b-8192"
    stream: bool = False
    max_tokens: int = 256

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [message.to_dict() for message in self.messages],
            "stream": self.stream,
            "max_tokens": self.max_tokens,
        }


@dataclass
class DDGSearchResult:
    """The parts of an instant-answer search result that are used."""

    heading: str = ""
    abstract: str = ""
    abstract_url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "DDGSearchResult":
        if data is None:
            return cls()
        data = _require_mapping(data, "search result")
        return cls(
            heading=_str_field(data, "Heading"),
            abstract=_str_field(data, "Abstract"),
            abstract_url=_str_field(data, "AbstractURL"),
        )