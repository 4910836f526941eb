import math

import pytest

openai = pytest.importorskip("openai")


@pytest.fixture
def oai(client):
    return openai.OpenAI(api_key="fake-key", base_url="http://testserver/v1", http_client=client, max_retries=0)


def test_chat_completion(oai):
    resp = oai.chat.completions.create(
        model="test-model", messages=[{"role": "user", "content": "Tell me about the garden"}], max_tokens=20
    )
    assert resp.object == "chat.completion"
    assert resp.choices[0].message.role == "assistant"
    assert resp.choices[0].message.content
    assert resp.choices[0].finish_reason == "length"
    assert resp.usage.completion_tokens <= 20


def test_chat_completion_stream(oai):
    stream = oai.chat.completions.create(
        model="test-model", messages=[{"role": "user", "content": "Hello"}], max_tokens=6, stream=True
    )
    text = ""
    finish = None
    for chunk in stream:
        if not chunk.choices:
            continue
        text += chunk.choices[0].delta.content or ""
        finish = chunk.choices[0].finish_reason or finish
    assert text.strip()
    assert finish == "length"


def test_completion(oai):
    resp = oai.completions.create(model="test-model", prompt="Once upon a time", max_tokens=15)
    assert resp.object == "text_completion"
    assert resp.choices[0].text
    assert resp.usage.prompt_tokens == 4


def test_embeddings_default_encoding(oai):
    resp = oai.embeddings.create(model="test-model", input=["first text", "second text"], dimensions=32)
    assert len(resp.data) == 2
    vector = list(resp.data[0].embedding)
    assert len(vector) == 32
    assert math.isclose(math.sqrt(sum(v * v for v in vector)), 1.0, rel_tol=1e-5)


def test_models(oai):
    models = oai.models.list()
    assert [m.id for m in models.data] == ["Qwen/Qwen2.5-1.5B-Instruct"]


def test_bad_request_surfaces_as_error(oai):
    with pytest.raises(openai.BadRequestError):
        oai.chat.completions.create(model="test-model", messages=None)
