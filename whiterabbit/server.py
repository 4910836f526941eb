from __future__ import annotations

import json
import random
import re
import secrets
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, Callable, Iterator, Sequence

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, StreamingResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from whiterabbit.common.schema import (
    ChatCompletionRequest,
    CompletionRequest,
    DetokenizeRequest,
    EmbeddingRequest,
    TokenizeRequest,
)
from whiterabbit.config import Settings, load_settings
from whiterabbit.corpus.loader import load_corpus
from whiterabbit.logging_utils import configure_logging, init_logger
from whiterabbit.mock import MockTokenizer, count_words, encode_base64, mock_embedding
from whiterabbit.textgen.engine import TextEngine
from whiterabbit.textgen.markov import ChainCache
from whiterabbit.textgen.result import GenerationResult
from whiterabbit.version import get_version_info

logger = init_logger(__name__)

ENDPOINTS = (
    "GET  /health",
    "GET  /version",
    "GET  /v1/models",
    "POST /v1/chat/completions",
    "POST /v1/completions",
    "POST /v1/embeddings",
    "POST /tokenize",
    "POST /detokenize",
)

_ERROR_TYPES = {400: "BadRequestError", 404: "NotFoundError", 405: "MethodNotAllowed"}


class ServiceState:
    def __init__(self, settings: Settings, loader: Callable[[], Sequence[str]] | None = None):
        self.settings = settings
        self.cache = ChainCache(loader or (lambda: load_corpus(settings)))
        self.engine = TextEngine(self.cache, generator=settings.generator)
        self.tokenizer = MockTokenizer()


state = ServiceState(load_settings())


def show_startup_banner(settings: Settings) -> None:
    lines = [
        "White Rabbit vLLM emulator",
        f"serving on {settings.host}:{settings.port}",
        f"model: {settings.served_model()}",
        f"generator: {settings.generator} (strict budget: {settings.strict_budget})",
        "endpoints:",
        *(f"  {endpoint}" for endpoint in ENDPOINTS),
    ]
    for line in lines:
        logger.info(line)


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = state.settings
    configure_logging(settings.log_level, settings.log_prefix)
    show_startup_banner(settings)
    if settings.preload:
        state.cache.get()
    yield


app = FastAPI(title="White Rabbit", version=get_version_info()["white_rabbit_version"], lifespan=lifespan)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "message": message,
                "type": _ERROR_TYPES.get(status_code, "InternalServerError"),
                "param": None,
                "code": status_code,
            }
        },
    )


@app.exception_handler(RequestValidationError)
async def validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    else:
        message = "invalid request body"
    return _error(400, message)


@app.exception_handler(StarletteHTTPException)
async def http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


def _uuid_hex() -> str:
    return uuid.uuid4().hex


def _fingerprint() -> str:
    return "fp_" + secrets.token_hex(8)


def _rng(seed: int | None) -> random.Random | None:
    return random.Random(seed) if seed is not None else None


def _generate(prompt: str, max_tokens: int | None, ignore_eos: bool, n: int, seed: int | None, capitalize: bool):
    strict = state.settings.strict_budget or ignore_eos
    rng = _rng(seed)
    return [state.engine.complete(prompt, max_tokens, strict, capitalize=capitalize, rng=rng) for _ in range(n)]


def _finish_reason(result: GenerationResult) -> str:
    return "length" if result.hit_max_length else "stop"


def _chunks(text: str) -> list[str]:
    return re.findall(r"\s*\S+", text)


def _sse(payload: dict[str, Any]) -> str:
    return f"data: {json.dumps(payload)}\n\n"


def _chat_logprobs(text: str, top_logprobs: int | None, rng: random.Random) -> dict[str, Any]:
    content = []
    for word in text.split():
        lp = -rng.random()
        entry = {"token": word, "logprob": lp, "bytes": list(word.encode("utf-8")), "top_logprobs": []}
        if top_logprobs:
            entry["top_logprobs"] = [{"token": word, "logprob": lp, "bytes": entry["bytes"]}]
        content.append(entry)
    return {"content": content}


def _completion_logprobs(text: str, rng: random.Random) -> dict[str, Any]:
    tokens = _chunks(text)
    text_offset, token_logprobs, top_logprobs = [], [], []
    offset = 0
    for tok in tokens:
        text_offset.append(offset)
        offset += len(tok)
        lp = -rng.random()
        token_logprobs.append(lp)
        top_logprobs.append({tok: lp})
    return {"tokens": tokens, "token_logprobs": token_logprobs, "text_offset": text_offset, "top_logprobs": top_logprobs}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
def version() -> dict[str, Any]:
    return get_version_info()


@app.get("/v1/models")
def models() -> dict[str, Any]:
    model = state.settings.served_model()
    return {
        "object": "list",
        "data": [
            {
                "id": model,
                "object": "model",
                "created": int(time.time()),
                "owned_by": "white-rabbit",
                "root": model,
                "parent": None,
                "max_model_len": state.settings.max_model_len,
            }
        ],
    }


@app.post("/v1/chat/completions")
def chat_completions(req: ChatCompletionRequest):
    if not req.messages:
        raise HTTPException(status_code=400, detail="messages must not be empty")

    results = _generate(req.prompt_text(), req.budget(), req.ignore_eos, req.n, req.seed, capitalize=True)
    completion_id = "chatcmpl-" + _uuid_hex()
    created = int(time.time())
    model = state.settings.served_model(req.model)
    fingerprint = _fingerprint()
    prompt_tokens = sum(count_words(m.text()) for m in req.messages)
    completion_tokens = sum(count_words(r.text) for r in results)
    usage = {
        "prompt_tokens": prompt_tokens,
        "completion_tokens": completion_tokens,
        "total_tokens": prompt_tokens + completion_tokens,
        "prompt_tokens_details": None,
    }

    if req.stream:
        include_usage = bool(req.stream_options and req.stream_options.include_usage)

        def events() -> Iterator[str]:
            base = {"id": completion_id, "object": "chat.completion.chunk", "created": created, "model": model,
                    "system_fingerprint": fingerprint}
            for index, result in enumerate(results):
                deltas = [{"role": "assistant", "content": ""}] + [{"content": c} for c in _chunks(result.text)]
                for delta in deltas:
                    yield _sse({**base, "choices": [{"index": index, "delta": delta, "logprobs": None,
                                                     "finish_reason": None}]})
                yield _sse({**base, "choices": [{"index": index, "delta": {}, "logprobs": None,
                                                 "finish_reason": _finish_reason(result)}]})
            if include_usage:
                yield _sse({**base, "choices": [], "usage": usage})
            yield "data: [DONE]\n\n"

        return StreamingResponse(events(), media_type="text/event-stream")

    rng = _rng(req.seed) or random.Random()
    choices = []
    for index, result in enumerate(results):
        choices.append(
            {
                "index": index,
                "message": {"role": "assistant", "content": result.text, "refusal": None, "tool_calls": []},
                "logprobs": _chat_logprobs(result.text, req.top_logprobs, rng) if req.logprobs else None,
                "finish_reason": _finish_reason(result),
                "stop_reason": None,
            }
        )
    return {
        "id": completion_id,
        "object": "chat.completion",
        "created": created,
        "model": model,
        "system_fingerprint": fingerprint,
        "choices": choices,
        "usage": usage,
        "prompt_logprobs": None,
    }


@app.post("/v1/completions")
def completions(req: CompletionRequest):
    if isinstance(req.prompt, list) and not req.prompt:
        raise HTTPException(status_code=400, detail="prompt must not be empty")

    prompt = req.prompt_text()
    results = _generate(prompt, req.max_tokens, req.ignore_eos, req.n, req.seed, capitalize=False)
    completion_id = "cmpl-" + _uuid_hex()
    created = int(time.time())
    model = state.settings.served_model(req.model)
    fingerprint = _fingerprint()
    want_logprobs = req.logprobs is not None and req.logprobs is not False
    prompt_tokens = count_words(prompt)
    completion_tokens = sum(count_words(r.text) for r in results)
    usage = {
        "prompt_tokens": prompt_tokens,
        "completion_tokens": completion_tokens,
        "total_tokens": prompt_tokens + completion_tokens,
    }

    def full_text(result: GenerationResult) -> str:
        if not req.echo:
            return result.text
        if prompt and result.text and not prompt[-1].isspace():
            return prompt + " " + result.text
        return prompt + result.text

    if req.stream:
        include_usage = bool(req.stream_options and req.stream_options.include_usage)

        def events() -> Iterator[str]:
            base = {"id": completion_id, "object": "text_completion", "created": created, "model": model,
                    "system_fingerprint": fingerprint}
            for index, result in enumerate(results):
                pieces = _chunks(full_text(result))
                for i, piece in enumerate(pieces):
                    last = i == len(pieces) - 1
                    yield _sse({**base, "choices": [{"index": index, "text": piece, "logprobs": None,
                                                     "finish_reason": _finish_reason(result) if last else None}]})
                if not pieces:
                    yield _sse({**base, "choices": [{"index": index, "text": "", "logprobs": None,
                                                     "finish_reason": _finish_reason(result)}]})
            if include_usage:
                yield _sse({**base, "choices": [], "usage": usage})
            yield "data: [DONE]\n\n"

        return StreamingResponse(events(), media_type="text/event-stream")

    rng = _rng(req.seed) or random.Random()
    choices = []
    for index, result in enumerate(results):
        text = full_text(result)
        choices.append(
            {
                "index": index,
                "text": text,
                "logprobs": _completion_logprobs(text, rng) if want_logprobs else None,
                "finish_reason": _finish_reason(result),
                "stop_reason": None,
            }
        )
    return {
        "id": completion_id,
        "object": "text_completion",
        "created": created,
        "model": model,
        "system_fingerprint": fingerprint,
        "choices": choices,
        "usage": usage,
    }


@app.post("/v1/embeddings")
def embeddings(req: EmbeddingRequest) -> dict[str, Any]:
    if isinstance(req.input, list) and not req.input:
        raise HTTPException(status_code=400, detail="Input cannot be empty")

    inputs = req.texts()
    dimensions = req.dimensions or state.settings.embedding_dim
    data = []
    for index, _ in enumerate(inputs):
        vector = mock_embedding(dimensions)
        data.append(
            {
                "object": "embedding",
                "embedding": encode_base64(vector) if req.encoding_format == "base64" else vector,
                "index": index,
            }
        )
    total = sum(count_words(text) for text in inputs)
    return {
        "id": "embd-" + _uuid_hex(),
        "object": "list",
        "created": int(time.time()),
        "model": state.settings.served_model(req.model),
        "data": data,
        "usage": {"prompt_tokens": total, "total_tokens": total},
    }


@app.post("/tokenize")
def tokenize(req: TokenizeRequest) -> dict[str, Any]:
    tokens = state.tokenizer.encode(req.text())
    return {"count": len(tokens), "max_model_len": state.settings.max_model_len, "tokens": tokens}


@app.post("/detokenize")
def detokenize(req: DetokenizeRequest) -> dict[str, str]:
    return {"prompt": state.tokenizer.decode(req.tokens)}


def main() -> None:
    import uvicorn

    uvicorn.run("whiterabbit.server:app", host=state.settings.host, port=state.settings.port)


if __name__ == "__main__":
    main()
