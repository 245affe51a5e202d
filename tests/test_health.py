import httpx

from embedding.JinaEmbedder import JinaEmbedder
from health.ChatHealth import ChatHealth
from health.EmbeddingHealth import EmbeddingHealth
from health.TestRunner import TestRunner


def _embedder_factory(response: httpx.Response):
    def factory(cfg):
        return JinaEmbedder(cfg, transport=httpx.MockTransport(lambda request: response))

    return factory


def test_embedding_health_passes_on_real_vector(cfg):
    health = EmbeddingHealth(
        cfg,
        expected_dim=3,
        embedder_factory=_embedder_factory(httpx.Response(200, json={"data": [{"embedding": [0.1, 0.2, 0.3]}]})),
    )

    assert health.run() is True


def test_embedding_health_fails_on_fallback_vector(cfg):
    health = EmbeddingHealth(cfg, embedder_factory=_embedder_factory(httpx.Response(401)))

    assert health.run() is False


def test_embedding_health_fails_on_dimension_mismatch(cfg):
    health = EmbeddingHealth(
        cfg,
        expected_dim=1024,
        embedder_factory=_embedder_factory(httpx.Response(200, json={"data": [{"embedding": [1.0]}]})),
    )

    assert health.run() is False


class _Check:
    def __init__(self, result=True, error=None):
        self.result = result
        self.error = error

    def run(self):
        if self.error:
            raise self.error
        return self.result


class _Chat:
    def __init__(self, ok):
        self.ok = ok

    def healthcheck(self):
        return self.ok


def test_chat_health_reports_healthcheck(cfg):
    assert ChatHealth(cfg, chat=_Chat(True)).run() is True
    assert ChatHealth(cfg, chat=_Chat(False)).run() is False


def test_runner_collects_results_and_survives_exceptions(cfg):
    runner = TestRunner(
        cfg,
        embedding_health=_Check(error=RuntimeError("boom")),
        chat_health=_Check(result=True),
    )

    assert runner.run_all() == {"embedding_health": False, "chat_health": True}
