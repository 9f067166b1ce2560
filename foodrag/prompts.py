"""Prompt templates and context assembly for each retrieval strategy."""

from typing import Dict, List

CORPUS_SYSTEM_PROMPT = (
    "You are a knowledgeable food expert who answers questions about dishes, "
    "ingredients and culinary traditions from around the world. Answer using the "
    "provided food facts, and say so when they do not cover the question."
)

WEB_SYSTEM_PROMPT = (
    "You are a helpful assistant that answers questions based on web search results. "
    "Be concise, accurate, and cite the sources when relevant."
)

CORPUS_ANSWER_PROMPT = """Use the following food facts to answer the question accurately.

Context:
{context}

Question: {question}
Answer:"""

WEB_ANSWER_PROMPT = """Use the following context from web search results to answer the question thoroughly and accurately.

Context:
{context}

Question: {question}
Answer:"""

PROMPTS = {
    "corpus": (CORPUS_SYSTEM_PROMPT, CORPUS_ANSWER_PROMPT, "\n"),
    "web": (WEB_SYSTEM_PROMPT, WEB_ANSWER_PROMPT, "\n\n"),
}


def build_context(strategy: str, passages: List[str]) -> str:
    _, _, separator = PROMPTS[strategy]
    return separator.join(passages)


def build_messages(strategy: str, question: str, context: str) -> List[Dict[str, str]]:
    system_prompt, answer_prompt, _ = PROMPTS[strategy]
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": answer_prompt.format(context=context, question=question)},
    ]
