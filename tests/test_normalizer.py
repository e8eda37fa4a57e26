"""Tests for phrase normalization and filename slugs."""

from __future__ import annotations

import pytest

from src.search.normalizer import normalize, slugify


class TestNormalize:
    def test_case_insensitive(self) -> None:
        assert normalize("Merhaba") == normalize("merhaba") == normalize("MERHABA") == "merhaba"

    def test_turkish_dotted_and_dotless_i(self) -> None:
        assert normalize("NASILSIN") == "nasılsın"
        assert normalize("İSTANBUL") == "istanbul"
        assert normalize("ÇĞÖŞÜ") == "çğöşü"

    def test_strips_sentence_punctuation(self) -> None:
        assert normalize("Nasılsın?") == "nasılsın"
        assert normalize("Evet, tabii; gel: \"şimdi\" 'hemen'!") == "evet tabii gel şimdi hemen"

    def test_keeps_other_punctuation(self) -> None:
        assert normalize("iyi-kötü") == "iyi-kötü"
        assert normalize("(sessizlik)") == "(sessizlik)"

    def test_collapses_whitespace(self) -> None:
        assert normalize("merhaba   dünya\n") == "merhaba dünya"
        assert normalize("  bir\t\niki  ") == "bir iki"

    def test_punctuation_between_spaces(self) -> None:
        assert normalize("evet . hayır") == "evet hayır"

    def test_empty(self) -> None:
        assert normalize("") == ""
        assert normalize(" ?! ") == ""

    @pytest.mark.parametrize(
        "text",
        ["Merhaba, nasılsın?", "  İYİ-kötü  (ŞEY)\n", "I ı İ i", "...", "Hey!!  Sen;  ORADA"],
    )
    def test_idempotent(self, text: str) -> None:
        once = normalize(text)
        assert normalize(once) == once


class TestSlugify:
    def test_first_five_words(self) -> None:
        assert slugify("Bir iki üç dört beş altı yedi") == "bir-iki-üç-dört-beş"

    def test_drops_non_letters(self) -> None:
        assert slugify("Ne oldu (şimdi)?") == "ne-oldu-şimdi"

    def test_truncates(self) -> None:
        slug = slugify("çokçokçokçokçokuzun " * 5)
        assert len(slug) == 50

    def test_empty_text(self) -> None:
        assert slugify("...") == ""
