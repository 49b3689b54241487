"""Tests for the probability model and the profile aggregator."""

from __future__ import annotations

import logging
from pathlib import Path
import sys

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.model.aggregator import ProfileAggregator
from src.model.errors import DuplicateLanguageError, ErrorCode
from src.model.probability import ProbabilityModel
from src.profiles.records import LanguageProfile


def _en() -> LanguageProfile:
    return LanguageProfile(name="en", frequencies={"a": 10, "ab": 5}, per_length_totals=(100, 50, 1))


def _fr() -> LanguageProfile:
    return LanguageProfile(name="fr", frequencies={"a": 3}, per_length_totals=(30, 1, 1))


def _merged_en_fr() -> ProfileAggregator:
    aggregator = ProfileAggregator(2)
    aggregator.merge(_en(), 0, 2)
    aggregator.merge(_fr(), 1, 2)
    return aggregator


# ---------------------------------------------------------------------------
# ProbabilityModel tests


def test_empty_model_has_no_languages_or_ngrams() -> None:
    model = ProbabilityModel(3)
    assert model.language_count == 3
    assert model.language_list() == ()
    assert len(model) == 0
    assert model.lookup("a") is None
    assert model.index_of("en") is None
    assert not model.frozen


def test_model_rejects_negative_size() -> None:
    with pytest.raises(ValueError):
        ProbabilityModel(-1)


def test_vector_for_allocates_zero_vector_once() -> None:
    model = ProbabilityModel(4)
    first = model.vector_for("ab")
    first[2] = 0.25
    second = model.vector_for("ab")
    assert second is first
    assert second.shape == (4,)
    assert second.dtype == np.float64
    assert np.allclose(second, [0.0, 0.0, 0.25, 0.0])


def test_vector_for_rejects_out_of_range_keys() -> None:
    model = ProbabilityModel(1)
    with pytest.raises(ValueError):
        model.vector_for("")
    with pytest.raises(ValueError):
        model.vector_for("abcd")
    assert len(model) == 0


def test_register_language_assigns_positions() -> None:
    model = ProbabilityModel(2)
    assert model.register_language("en") == 0
    assert model.register_language("fr") == 1
    assert model.index_of("fr") == 1
    with pytest.raises(ValueError):
        model.register_language("de")


def test_lookup_returns_read_only_view() -> None:
    model = ProbabilityModel(1)
    model.vector_for("a")[0] = 0.5
    view = model.lookup("a")
    assert view is not None
    with pytest.raises(ValueError):
        view[0] = 1.0
    assert model.lookup("a")[0] == pytest.approx(0.5)


def test_freeze_blocks_mutation_and_writes() -> None:
    model = ProbabilityModel(1)
    vector = model.vector_for("a")
    model.register_language("en")
    model.freeze()

    assert model.frozen
    assert not vector.flags.writeable
    with pytest.raises(RuntimeError):
        model.vector_for("b")
    with pytest.raises(RuntimeError):
        model.register_language("fr")


# ---------------------------------------------------------------------------
# ProfileAggregator tests


def test_merge_computes_conditional_probabilities() -> None:
    model = _merged_en_fr().model

    assert model.language_list() == ("en", "fr")
    assert np.allclose(model.lookup("a"), [0.10, 0.10])
    assert np.allclose(model.lookup("ab"), [0.10, 0.0])
    assert model.index_of("en") == 0
    assert model.index_of("fr") == 1
    assert model.index_of("de") is None


def test_every_vector_matches_total_language_count() -> None:
    aggregator = ProfileAggregator(3)
    aggregator.merge(_en())
    aggregator.merge(_fr())
    aggregator.merge(LanguageProfile(name="de", frequencies={"der": 7, "x": 1}, per_length_totals=(10, 1, 70)))

    model = aggregator.model
    for ngram in model.ngrams():
        assert model.lookup(ngram).shape == (3,)
    assert model.lookup("der")[2] == pytest.approx(0.1)


def test_merge_skips_invalid_ngram_lengths_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    profile = LanguageProfile(
        name="en",
        frequencies={"a": 1, "abcd": 4, "": 2, "abc": 3},
        per_length_totals=(10, 10, 30),
    )
    aggregator = ProfileAggregator(1)

    with caplog.at_level(logging.WARNING, logger="src.model.aggregator"):
        assert aggregator.merge(profile) == 0

    model = aggregator.model
    assert "abcd" not in model
    assert "" not in model
    assert model.lookup("abc")[0] == pytest.approx(0.1)
    assert all(1 <= len(ngram) <= 3 for ngram in model.ngrams())
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert "abcd" in caplog.text


def test_merge_skips_lengths_without_totals(caplog: pytest.LogCaptureFixture) -> None:
    profile = LanguageProfile(name="en", frequencies={"a": 1, "ab": 2}, per_length_totals=(4, 0, 0))
    aggregator = ProfileAggregator(1)

    with caplog.at_level(logging.WARNING, logger="src.model.aggregator"):
        aggregator.merge(profile)

    assert aggregator.model.lookup("a")[0] == pytest.approx(0.25)
    assert aggregator.model.lookup("ab") is None
    assert "'ab'" in caplog.text


def test_duplicate_language_leaves_model_untouched() -> None:
    aggregator = _merged_en_fr()
    model = aggregator.model
    before = {ngram: model.lookup(ngram).copy() for ngram in model.ngrams()}

    second_en = LanguageProfile(name="en", frequencies={"a": 99, "zz": 1}, per_length_totals=(100, 10, 1))
    with pytest.raises(DuplicateLanguageError) as excinfo:
        aggregator.merge(second_en, 1, 2)

    assert excinfo.value.name == "en"
    assert excinfo.value.code is ErrorCode.DUPLICATE_LANGUAGE
    assert model.language_list() == ("en", "fr")
    assert set(model.ngrams()) == set(before)
    for ngram, vector in before.items():
        assert np.array_equal(model.lookup(ngram), vector)


def test_duplicate_detected_before_index_checks() -> None:
    aggregator = ProfileAggregator(1)
    aggregator.merge(_en())
    with pytest.raises(DuplicateLanguageError):
        aggregator.merge(_en())


def test_merge_rejects_out_of_range_index() -> None:
    aggregator = ProfileAggregator(2)
    with pytest.raises(ValueError):
        aggregator.merge(_en(), 2)
    with pytest.raises(ValueError):
        aggregator.merge(_en(), -1)
    assert aggregator.merged_count == 0
    assert len(aggregator.model) == 0


def test_merge_requires_next_free_index() -> None:
    aggregator = ProfileAggregator(2)
    with pytest.raises(ValueError):
        aggregator.merge(_en(), 1)
    assert aggregator.model.language_list() == ()


def test_merge_rejects_mismatched_session_total() -> None:
    aggregator = ProfileAggregator(2)
    aggregator.merge(_en(), 0, 2)
    with pytest.raises(ValueError):
        aggregator.merge(_fr(), 1, 3)
    assert aggregator.model.language_list() == ("en",)
    assert aggregator.model.lookup("a").shape == (2,)


def test_merge_all_keeps_order_stable() -> None:
    aggregator = ProfileAggregator(2)
    model = aggregator.merge_all([_fr(), _en()])

    assert model.language_list() == ("fr", "en")
    assert model.language_list() == model.language_list()
    assert np.allclose(model.lookup("ab"), [0.0, 0.1])


def test_merge_after_freeze_fails() -> None:
    aggregator = ProfileAggregator(2)
    aggregator.merge(_en())
    aggregator.model.freeze()
    with pytest.raises(RuntimeError):
        aggregator.merge(_fr())


def test_aggregator_rejects_negative_total() -> None:
    with pytest.raises(ValueError):
        ProfileAggregator(-2)
