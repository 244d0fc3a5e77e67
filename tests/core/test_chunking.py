"""
Test suite for sliding-window chunking.

Tests window boundaries, overlap, termination and the chunk cap.
Dependencies: pytest, docrag.core.document_processing
System role: Chunker verification
"""

import logging

import pytest

from docrag.core.document_processing import TextChunker, chunk_text
from docrag.core.exceptions import DocRAGError, ErrorKind


class TestChunkText:
    """Test suite for chunk_text function."""

    def test_4000_chars_gives_three_overlapping_windows(self) -> None:
        text = "".join(chr(ord("a") + i % 26) for i in range(4000))

        chunks = chunk_text(text, chunk_size=2000, overlap=200)

        assert chunks == [text[0:2000], text[1800:3800], text[3600:4000]]

    def test_short_text_is_single_chunk(self) -> None:
        assert chunk_text("Hello world", chunk_size=2000, overlap=200) == ["Hello world"]

    def test_text_equal_to_chunk_size_is_single_chunk(self) -> None:
        text = "x" * 2000
        assert chunk_text(text) == [text]

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t  \n"])
    def test_blank_text_gives_no_chunks(self, text: str) -> None:
        assert chunk_text(text) == []

    def test_chunks_cover_text_in_order(self) -> None:
        text = "word " * 1000

        chunks = chunk_text(text, chunk_size=300, overlap=50)

        assert chunks[0] == text[:300]
        assert text.endswith(chunks[-1])
        position = 0
        for chunk in chunks:
            found = text.find(chunk, position)
            assert found >= position
            position = found + 1

    def test_chunks_reconstruct_text(self) -> None:
        text = "".join(chr(ord("a") + (i * 7) % 26) for i in range(5321))
        size, overlap = 500, 120

        chunks = chunk_text(text, chunk_size=size, overlap=overlap)

        assert chunks[0] + "".join(chunk[overlap:] for chunk in chunks[1:]) == text

    def test_consecutive_windows_share_overlap(self) -> None:
        text = "abcdefghij" * 50

        chunks = chunk_text(text, chunk_size=100, overlap=20)

        for previous, current in zip(chunks, chunks[1:]):
            assert previous[-20:] == current[:20]

    def test_whitespace_only_window_is_skipped(self) -> None:
        text = "a" * 10 + " " * 30 + "b" * 10

        chunks = chunk_text(text, chunk_size=10, overlap=0)

        assert chunks == ["a" * 10, "b" * 10]

    def test_emitted_chunks_keep_surrounding_whitespace(self) -> None:
        chunks = chunk_text("  padded  ", chunk_size=100, overlap=0)
        assert chunks == ["  padded  "]

    def test_overlap_larger_than_chunk_size_terminates(self) -> None:
        text = "z" * 1000

        chunks = chunk_text(text, chunk_size=100, overlap=500)

        assert chunks
        assert len(chunks) < 1000
        assert text.endswith(chunks[-1])

    def test_negative_overlap_behaves_as_zero(self) -> None:
        text = "y" * 250
        assert chunk_text(text, chunk_size=100, overlap=-5) == ["y" * 100, "y" * 100, "y" * 50]

    @pytest.mark.parametrize("chunk_size", [0, -1])
    def test_non_positive_chunk_size_is_rejected(self, chunk_size: int) -> None:
        with pytest.raises(DocRAGError) as exc_info:
            chunk_text("text", chunk_size=chunk_size)
        assert exc_info.value.kind is ErrorKind.VALIDATION

    def test_chunk_cap_stops_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        text = "q" * 1000

        with caplog.at_level(logging.WARNING):
            chunks = chunk_text(text, chunk_size=10, overlap=0, max_chunks=5)

        assert len(chunks) == 5
        assert "Chunk limit reached" in caplog.text

    def test_is_deterministic(self) -> None:
        text = "The quick brown fox. " * 300
        assert chunk_text(text, 500, 100) == chunk_text(text, 500, 100)


class TestTextChunker:
    """Test suite for TextChunker."""

    def test_split_stamps_document_position(self) -> None:
        chunker = TextChunker(chunk_size=2000, chunk_overlap=200)

        chunks = chunker.split("a" * 4000, "doc-1")

        assert [c.chunk_index for c in chunks] == [0, 1, 2]
        assert {c.total_chunks for c in chunks} == {3}
        assert {c.document_id for c in chunks} == {"doc-1"}
        assert chunks[1].to_metadata() == {
            "document_id": "doc-1",
            "chunk_index": 1,
            "total_chunks": 3,
        }

    def test_split_blank_text_returns_empty_list(self) -> None:
        assert TextChunker().split("   ", "doc-1") == []

    def test_rejects_non_positive_chunk_size(self) -> None:
        with pytest.raises(DocRAGError):
            TextChunker(chunk_size=0)
