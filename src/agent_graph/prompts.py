"""
Chat prompt templates.

A ``ChatTemplate`` is an ordered list of message templates whose text uses
f-string style ``{name}`` fields, plus ``MessagesPlaceholder`` entries that
splice a list of prior messages (e.g. a chat history) into the rendered
conversation.

**Example**:

    ```python
    from agent_graph.prompts import ChatTemplate, MessagesPlaceholder
    from agent_graph.models import system_message, user_message

    template = ChatTemplate.from_messages(
        system_message("you are a helpful assistant.\\ncontext: {context}"),
        MessagesPlaceholder("chat_history", optional=True),
        user_message("question: {question}"),
    )
    messages = template.format(context="weather", question="Paris?")
    ```

Literal braces are written doubled (``{{`` / ``}}``), as with ``str.format``.
"""

from __future__ import annotations

import string
from typing import Any, Iterable, List, Mapping, Sequence, Union

from pydantic import BaseModel, ConfigDict

from agent_graph.errors import MissingVariableError
from agent_graph.models.messages import Message

__all__ = ["MessagesPlaceholder", "ChatTemplate", "template_variables"]

_formatter = string.Formatter()


class MessagesPlaceholder(BaseModel):
    """Slot filled with the message list stored under ``name``."""

    name: str
    optional: bool = False

    model_config = ConfigDict(frozen=True)

    def __init__(self, name: str, optional: bool = False, **kwargs: Any):
        super().__init__(name=name, optional=optional, **kwargs)


TemplatePart = Union[Message, MessagesPlaceholder]


def template_variables(text: str) -> List[str]:
    """Top-level field names referenced by an f-string template, in order."""
    names: List[str] = []
    for _, field, spec, _ in _formatter.parse(text):
        if field is None:
            continue
        # "{user.name}" / "{items[0]}" resolve against the "user" / "items" variable
        root = field.split(".", 1)[0].split("[", 1)[0]
        if not root:
            raise ValueError(f"positional fields are not supported: {text!r}")
        found = [root]
        # "{q:>{width}}" also reads "width"
        if spec:
            found.extend(template_variables(spec))
        for name in found:
            if name not in names:
                names.append(name)
    return names


def _render(text: str, variables: Mapping[str, Any]) -> str:
    for name in template_variables(text):
        if name not in variables:
            raise MissingVariableError(name)
    return text.format_map(variables)


def _coerce_history(name: str, value: Any) -> List[Message]:
    if isinstance(value, Message):
        return [value]
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"placeholder {name!r} expects a list of messages, got {type(value).__name__}")
    return [m if isinstance(m, Message) else Message.model_validate(m) for m in value]


class ChatTemplate:
    """Ordered message templates rendered against a variables mapping."""

    def __init__(self, parts: Iterable[TemplatePart]):
        self.parts: Sequence[TemplatePart] = tuple(parts)
        for part in self.parts:
            if not isinstance(part, (Message, MessagesPlaceholder)):
                raise TypeError(f"unsupported template part: {part!r}")

    @classmethod
    def from_messages(cls, *parts: TemplatePart) -> "ChatTemplate":
        return cls(parts)

    @property
    def input_variables(self) -> List[str]:
        """Every variable the template reads, placeholders included."""
        names: List[str] = []
        for part in self.parts:
            found = [part.name] if isinstance(part, MessagesPlaceholder) else template_variables(part.content)
            names.extend(n for n in found if n not in names)
        return names

    def format(self, variables: Mapping[str, Any] | None = None, **kwargs: Any) -> List[Message]:
        values = {**(variables or {}), **kwargs}
        rendered: List[Message] = []
        for part in self.parts:
            if isinstance(part, MessagesPlaceholder):
                if part.name not in values or values[part.name] is None:
                    if part.optional:
                        continue
                    raise MissingVariableError(part.name)
                rendered.extend(_coerce_history(part.name, values[part.name]))
            else:
                rendered.append(part.model_copy(update={"content": _render(part.content, values)}))
        return rendered
