"""Text helpers including sentence-aware chunking."""

from __future__ import annotations

import re
from typing import Iterable, List

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def split_sentences(text: str) -> List[str]:
    """Split text after sentence-terminal punctuation followed by whitespace."""
    return [sentence for sentence in _SENTENCE_BOUNDARY.split(text) if sentence]


def chunk_text(text: str, *, max_chars: int = 1000, overlap: int = 200) -> List[str]:
    """Group sentences into chunks of roughly ``max_chars`` characters.

    Sentences are never split, so a sentence longer than ``max_chars`` ends up
    as its own oversized chunk. Each new chunk is seeded with the last
    ``overlap // 5`` words of the previous one, five characters being the
    assumed average word length.
    """
    if not text or not text.strip():
        return []

    overlap_words = max(overlap, 0) // 5
    chunks: List[str] = []
    buffer = ""

    for sentence in split_sentences(text):
        if buffer and len(buffer) + len(sentence) > max_chars:
            chunks.append(buffer.strip())
            carried = buffer.split(" ")[-overlap_words:] if overlap_words else []
            buffer = " ".join(carried + [sentence])
        else:
            buffer = f"{buffer} {sentence}" if buffer else sentence

    if buffer.strip():
        chunks.append(buffer.strip())
    return chunks


def normalize_whitespace(lines: Iterable[str]) -> str:
    """Collapse whitespace and join lines."""
    return "\n".join(line.strip() for line in lines if line.strip())
