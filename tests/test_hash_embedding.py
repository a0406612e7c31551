import math

import pytest

from ragqa.models.embedding.hash_embedding import HashEmbedding, hash_token, tokenize


def _norm(v):
    return math.sqrt(sum(x * x for x in v))


class TestTokenize:
    def test_lowercases_and_splits_on_non_alphanumerics(self):
        assert tokenize("Hello, World!  foo_bar-42") == ["hello", "world", "foo", "bar", "42"]

    def test_punctuation_only_yields_nothing(self):
        assert tokenize("?!... --") == []


class TestHashToken:
    def test_djb2_small_value(self):
        # 5381 * 33 + ord("a")
        assert hash_token("a") == 177670

    def test_long_token_stays_in_32_bit_range(self):
        h = hash_token("supercalifragilisticexpialidocious" * 4)
        assert 0 <= h <= 2 ** 31

    def test_deterministic(self):
        assert hash_token("paris") == hash_token("paris")


class TestHashEmbedding:
    @pytest.mark.parametrize("text", ["", "a", "The capital of France is Paris.", "x " * 5000])
    def test_length_is_always_dim(self, text):
        assert len(HashEmbedding(dim=256).embed(text)) == 256

    def test_unit_norm_when_tokens_present(self):
        vec = HashEmbedding(dim=256).embed("What is the capital of France?")
        assert _norm(vec) == pytest.approx(1.0)

    @pytest.mark.parametrize("text", ["", "   ", "!!! ???"])
    def test_zero_vector_without_tokens(self, text):
        assert HashEmbedding(dim=64).embed(text) == [0.0] * 64

    def test_same_text_same_vector(self):
        emb = HashEmbedding(dim=256)
        assert emb.embed("Paris is in France") == emb.embed("Paris is in France")

    def test_single_token_lands_in_hash_bin(self):
        vec = HashEmbedding(dim=256).embed("a")
        assert vec[177670 % 256] == 1.0
        assert sum(vec) == 1.0

    def test_repeated_token_accumulates(self):
        vec = HashEmbedding(dim=256).embed("a a b")
        ia, ib = hash_token("a") % 256, hash_token("b") % 256
        assert vec[ia] == pytest.approx(2 / math.sqrt(5))
        assert vec[ib] == pytest.approx(1 / math.sqrt(5))

    def test_role_is_ignored(self):
        emb = HashEmbedding(dim=32)
        assert emb.embed("paris", role="query") == emb.embed("paris", role="passage")

    def test_invalid_dim(self):
        with pytest.raises(ValueError):
            HashEmbedding(dim=0)
