# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-07
# Updated: 2026-10-17
# Description: TestRunner
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Dict, Optional

from config.Config import Config
from utility.logging_utils import get_class_logger

from health.ChatHealth import ChatHealth
from health.EmbeddingHealth import EmbeddingHealth


class TestRunner:
    """
    Orchestrates all smoke tests and reports a consolidated result.

    Tests included:
      - EmbeddingHealth (Jina embeddings)
      - ChatHealth      (chat completion)
    """

    __test__ = False  # not a pytest class

    def __init__(
        self,
        cfg: Config,
        *,
        embedding_health: Optional[EmbeddingHealth] = None,
        chat_health: Optional[ChatHealth] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.cfg = cfg
        self.logger = logger or get_class_logger(self.__class__)

        self.logger.info("Initialising SmokeTestRunner")

        # Instantiate individual health check classes
        self.embedding_health = embedding_health or EmbeddingHealth(cfg)
        self.chat_health = chat_health or ChatHealth(cfg)

    # -------------------------------------------------------------------------
    def run_all(self) -> Dict[str, bool]:
        """
        Run all configured smoke tests.

        :return: Dict mapping test names to True/False.
        """
        self.logger.info("Starting smoke test suite")

        results: Dict[str, bool] = {}

        # Embedding test
        try:
            self.logger.info("Running EmbeddingHealth.run()")
            ok_embed = self.embedding_health.run()
            results["embedding_health"] = ok_embed
            self._log_result("EmbeddingHealth", ok_embed)
        except Exception as e:
            self.logger.exception("EmbeddingHealth.run() raised an exception: %s", e)
            results["embedding_health"] = False

        # Chat test
        try:
            self.logger.info("Running ChatHealth.run()")
            ok_chat = self.chat_health.run()
            results["chat_health"] = ok_chat
            self._log_result("ChatHealth", ok_chat)
        except Exception as e:
            self.logger.exception("ChatHealth.run() raised an exception: %s", e)
            results["chat_health"] = False

        # Summary
        self._log_summary(results)
        return results

    # -------------------------------------------------------------------------
    def _log_result(self, name: str, ok: bool) -> None:
        if ok:
            self.logger.info("%s: PASS", name)
        else:
            self.logger.error("%s: FAIL", name)

    def _log_summary(self, results: Dict[str, bool]) -> None:
        total = len(results)
        passed = sum(1 for v in results.values() if v)
        failed = total - passed

        self.logger.info("Smoke test summary: %d total, %d passed, %d failed", total, passed, failed)

        for name, ok in results.items():
            status = "PASS" if ok else "FAIL"
            self.logger.info("  %s: %s", name, status)


def main() -> int:
    cfg = Config.from_env()
    runner = TestRunner(cfg)

    results = runner.run_all()

    # Optional simple console summary (separate from logger)
    print("\n=== Smoke Test Results ===")
    for name, ok in results.items():
        print(f"{name}: {'PASS' if ok else 'FAIL'}")

    overall_ok = all(results.values())
    print(f"\nOverall smoke test result: {'PASS' if overall_ok else 'FAIL'}")
    return 0 if overall_ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
