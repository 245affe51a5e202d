# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-17
# Description: main.py
# -----------------------------------------------------------------------------
"""
Ask one question against the local knowledge base.

    $ kbrag
    Ask a question: ...

Loads the documents, prompts once, retrieves, answers, prints, exits.

The prompt is read on the main thread before any event loop starts, so
Ctrl-C at the prompt interrupts the blocking read directly.
"""
import asyncio
import sys
from typing import Callable, List

from cli.AppContainer import AppContainer
from cli.TerminalPrompt import TerminalPrompt
from document.KBDocument import KBDocument
from utility.logging_utils import get_logger

logger = get_logger(__name__)

PROMPT = "Ask a question: "
NO_RELEVANT_DOCUMENTS = "No relevant documents found."


async def answer_query(
        container: AppContainer,
        prompt: TerminalPrompt,
        query: str,
        documents: List[KBDocument],
) -> int:
    try:
        result = await container.ask_service.ask(query, documents)
    finally:
        await container.aclose()

    if result.answer is None:
        prompt.write(NO_RELEVANT_DOCUMENTS)
        return 0

    prompt.write(f"\n📄 Context from: {', '.join(result.source_names)}")
    prompt.write(f"🧠 Answer: {result.answer}")
    return 0


def run_once(container: AppContainer, prompt: TerminalPrompt) -> int:
    try:
        documents = container.document_loader.load_documents()
    except FileNotFoundError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    query = prompt.question(PROMPT)
    return asyncio.run(answer_query(container, prompt, query, documents))


def main(
        container_factory: Callable[[], AppContainer] = AppContainer,
        prompt: TerminalPrompt | None = None,
) -> int:
    with prompt or TerminalPrompt() as terminal:
        container = container_factory()
        try:
            return run_once(container, terminal)
        except KeyboardInterrupt:
            terminal.write()
            return 130
        finally:
            if not container.closed:
                asyncio.run(container.aclose())


if __name__ == "__main__":
    raise SystemExit(main())
