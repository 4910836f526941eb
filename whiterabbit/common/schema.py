from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class OpenAIRequest(BaseModel):
    model_config = ConfigDict(extra="allow")


class ChatMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: str
    content: str | list[dict[str, Any]] | None = None

    def text(self) -> str:
        if self.content is None:
            return ""
        if isinstance(self.content, str):
            return self.content
        parts = [str(part.get("text", "")) for part in self.content if part.get("type", "text") == "text"]
        return " ".join(p for p in parts if p)


class StreamOptions(BaseModel):
    include_usage: bool = False


class BaseCompletionRequest(OpenAIRequest):
    model: str
    max_tokens: int | None = None
    n: int = Field(default=1, ge=1, le=128)
    stream: bool = False
    stream_options: StreamOptions | None = None
    ignore_eos: bool = False
    temperature: float | None = None
    top_p: float | None = None
    seed: int | None = None


class ChatCompletionRequest(BaseCompletionRequest):
    messages: list[ChatMessage]
    max_completion_tokens: int | None = None
    logprobs: bool = False
    top_logprobs: int | None = None

    def budget(self) -> int | None:
        return self.max_completion_tokens if self.max_completion_tokens is not None else self.max_tokens

    def prompt_text(self) -> str:
        for message in reversed(self.messages):
            if message.role == "user":
                return message.text()
        return self.messages[-1].text() if self.messages else ""


class CompletionRequest(BaseCompletionRequest):
    prompt: Union[str, list[str], list[int], list[list[int]]]
    echo: bool = False
    logprobs: bool | int | None = None

    def prompt_text(self) -> str:
        if isinstance(self.prompt, str):
            return self.prompt
        if not self.prompt:
            return ""
        first = self.prompt[0]
        if isinstance(first, str):
            return first
        return ""


class EmbeddingRequest(OpenAIRequest):
    model: str
    input: Union[str, list[str], list[int], list[list[int]]]
    dimensions: int | None = Field(default=None, ge=1, le=8192)
    encoding_format: Literal["float", "base64"] = "float"

    def texts(self) -> list[str]:
        if isinstance(self.input, str):
            return [self.input]
        if self.input and isinstance(self.input[0], str):
            return list(self.input)
        if self.input and isinstance(self.input[0], list):
            return ["<token_sequence>"] * len(self.input)
        return ["<token_sequence>"]


class TokenizeRequest(OpenAIRequest):
    model: str | None = None
    prompt: str | None = None
    messages: list[ChatMessage] | None = None
    add_special_tokens: bool = True

    def text(self) -> str:
        if self.prompt is not None:
            return self.prompt
        return "\n".join(m.text() for m in self.messages or [])


class DetokenizeRequest(OpenAIRequest):
    model: str | None = None
    tokens: list[int]
