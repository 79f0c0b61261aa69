"""
Tests for pgn_book.core.digest

Tests content digests used as game record identity.
"""

import base64

from pgn_book.core.digest import content_digest


class TestDigestDeterminism:
    """Tests that digests are deterministic."""

    def test_same_text_same_digest(self):
        """Identical text produces identical digests."""
        text = '[Event "x"]\n\n1. e4 e5 *'
        assert content_digest(text) == content_digest("".join(list(text)))

    def test_known_value(self):
        """Digest is standard base64 of SHA-256."""
        assert content_digest("") == "47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="


class TestDigestUniqueness:
    """Tests that different records produce different digests."""

    def test_different_text_different_digest(self):
        """A single changed character changes the digest."""
        assert content_digest("1. e4 e5 *") != content_digest("1. e4 e6 *")

    def test_whitespace_matters(self):
        """Digest is over exact text, whitespace included."""
        assert content_digest("1. e4 *") != content_digest("1. e4 * ")


class TestDigestFormat:
    """Tests for digest format."""

    def test_fixed_length(self):
        """Digest is 44 base64 characters for any input."""
        for text in ["", "a", "x" * 10_000]:
            assert len(content_digest(text)) == 44

    def test_decodes_to_32_bytes(self):
        """Digest decodes to a 32-byte SHA-256 value."""
        assert len(base64.b64decode(content_digest("game"))) == 32

    def test_unicode_input(self):
        """Non-ASCII player names are hashed as UTF-8."""
        assert len(content_digest('[White "Æsir Ørsted"]')) == 44
