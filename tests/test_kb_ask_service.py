import asyncio

from document.KBDocument import KBDocument
from retrieval.KBRetriever import KBRetriever
from services.KBAnswerService import KBAnswerService
from services.KBAskService import KBAskService
from stubs import StubChatClient, StubEmbedder

QUERY = "Tell me about B"


def _service(vectors, chat):
    return KBAskService(
        retriever=KBRetriever(StubEmbedder(vectors)),
        answer_service=KBAnswerService(chat_client=chat),
    )


def _documents():
    return [
        KBDocument(filename="a.json", content="A"),
        KBDocument(filename="b.json", content="B"),
        KBDocument(filename="c.json", content="C"),
    ]


def test_only_relevant_document_becomes_context():
    chat = StubChatClient(answer="B it is.")
    service = _service(
        {QUERY: [1.0, 0.0], "A": [0.0, 1.0], "B": [0.9, 0.1], "C": [-1.0, 0.0]},
        chat,
    )

    result = asyncio.run(service.ask(QUERY, _documents()))

    assert result.source_names == ["b.json"]
    assert result.context == "B"
    assert result.answer == "B it is."
    assert len(chat.calls) == 1
    assert chat.calls[0]["messages"][1]["content"].startswith("Context: B\n\nQuestion: Tell me about B")


def test_nothing_relevant_skips_answer_generation():
    chat = StubChatClient()
    service = _service(
        {QUERY: [1.0, 0.0], "A": [0.0, 1.0], "B": [1.0, 2.0], "C": [-1.0, 0.0]},
        chat,
    )

    result = asyncio.run(service.ask(QUERY, _documents()))

    assert result.sources == []
    assert result.answer is None
    assert chat.calls == []


def test_context_joins_ranked_documents_with_blank_lines():
    chat = StubChatClient()
    service = _service(
        {QUERY: [1.0, 0.0], "A": [0.8, 0.2], "B": [1.0, 0.0], "C": [0.0, 1.0]},
        chat,
    )

    result = asyncio.run(service.ask(QUERY, _documents()))

    assert result.source_names == ["b.json", "a.json"]
    assert result.context == "B\n\nA"


def test_answer_failure_degrades_to_apology():
    chat = StubChatClient(error=RuntimeError("gateway down"))
    service = _service({QUERY: [1.0], "A": [1.0], "B": [1.0], "C": [1.0]}, chat)

    result = asyncio.run(service.ask(QUERY, _documents()))

    assert result.answer == "Sorry, I encountered an error while generating an answer."
    assert len(result.sources) == 3
