"""
Candidate generation strategies
"""
import pytest

from brandstorm_domains.config.constants import CreativityLevel, Strategy
from brandstorm_domains.core.models import Candidate
from brandstorm_domains.services.generator import (
    CandidateGenerator,
    creativity_for_mode,
    dedupe_valid,
    leader_key,
    portmanteau_candidates,
    spread_strategies,
    substitute_numbers,
    temperature_for,
    vowel_removal_candidates,
    word_slicing_candidates,
)
from brandstorm_domains.utils.validators import validate_domain
from tests.conftest import FakeAI

KEYWORDS = ["artisanal", "pickle", "factory"]


def _domains(candidates):
    return [c.domain for c in candidates]


class TestStrategies:

    def test_portmanteau(self):
        candidates = portmanteau_candidates(["pickle", "factory"], [".com"])

        assert _domains(candidates) == ["pictory.com"]
        assert candidates[0].strategy == Strategy.PORTMANTEAU.value

    def test_word_slicing_lets_tld_complete_word(self):
        candidates = word_slicing_candidates(["generator"], [".com", ".tor"])

        assert _domains(candidates) == ["genera.tor"]

    def test_word_slicing_requires_three_letter_prefix(self):
        assert word_slicing_candidates(["actor"], [".tor"]) == []

    def test_vowel_removal_length_window(self):
        candidates = vowel_removal_candidates(["pickle", "ai", "artisanal"], [".com"])

        assert _domains(candidates) == ["pckl.com", "rtsnl.com"]

    def test_substitute_numbers(self):
        assert substitute_numbers("factory") == "fac2ry"
        assert substitute_numbers("translate") == "transl8"
        assert substitute_numbers("pickle") == "pickle"


def test_creativity_for_mode():
    assert creativity_for_mode("competitive") == CreativityLevel.WILD
    assert creativity_for_mode("premium") == CreativityLevel.CONSERVATIVE
    assert creativity_for_mode("standard") == CreativityLevel.MODERATE
    assert creativity_for_mode("bogus") == CreativityLevel.MODERATE
    assert creativity_for_mode(None) == CreativityLevel.MODERATE


def test_temperature_for():
    assert temperature_for("wild") == 1.0
    assert temperature_for(CreativityLevel.CONSERVATIVE) == 0.6
    assert temperature_for("bogus") == 0.8


def test_spread_strategies_keeps_one_of_each():
    candidates = [
        Candidate(domain="a.com", strategy="x"),
        Candidate(domain="b.com", strategy="x"),
        Candidate(domain="c.com", strategy="y"),
        Candidate(domain="d.com", strategy="x"),
        Candidate(domain="e.com", strategy="z"),
    ]

    assert _domains(spread_strategies(candidates, 3)) == ["a.com", "c.com", "e.com"]
    assert _domains(spread_strategies(candidates, 10)) == [
        "a.com", "c.com", "e.com", "b.com", "d.com"
    ]


def test_leader_key_spreads_direct_keywords():
    candidates = [
        Candidate(domain="artisanal.com", strategy="direct-keyword"),
        Candidate(domain="artisanal.io", strategy="direct-keyword"),
        Candidate(domain="fctry.com", strategy="vowel-removal"),
        Candidate(domain="pickle.io", strategy="direct-keyword"),
    ]

    assert _domains(spread_strategies(candidates, 3, key=leader_key)) == [
        "artisanal.com", "fctry.com", "pickle.io"
    ]


def test_dedupe_valid():
    candidates = [
        Candidate(domain="pickle.com", strategy="direct-keyword"),
        Candidate(domain="pickle.com", strategy="llm-creative"),
        Candidate(domain="-bad.com", strategy="llm-creative"),
    ]

    result = dedupe_valid(candidates)

    assert len(result) == 1
    assert result[0].strategy == "direct-keyword"


class TestBrainstorm:

    @pytest.mark.asyncio
    async def test_rejects_tlds_outside_offered_set(self, rng):
        ai = FakeAI("pickle.xyz\nbrine.io")
        generator = CandidateGenerator(ai, rng=rng)

        candidates = await generator.brainstorm(
            "pickles", ["pickle"], [".io", ".com"], CreativityLevel.MODERATE, 10
        )

        assert _domains(candidates) == ["brine.io"]
        assert candidates[0].strategy == Strategy.LLM_INTELLIGENT_TLD.value
        assert ai.calls[0]["temperature"] == 0.8
        assert ai.calls[0]["max_tokens"] == 800

    @pytest.mark.asyncio
    async def test_respects_count(self, rng):
        ai = FakeAI("a1.io\nb1.io\nc1.io\nd1.io")
        generator = CandidateGenerator(ai, rng=rng)

        candidates = await generator.brainstorm("x", [], [".io"], CreativityLevel.WILD, 2)

        assert _domains(candidates) == ["a1.io", "b1.io"]

    @pytest.mark.asyncio
    async def test_drops_repeats_before_counting(self, rng):
        ai = FakeAI("pickle.io\n1. pickle.io\npickle.io\nbrine.io\nsour.io")
        generator = CandidateGenerator(ai, rng=rng)

        candidates = await generator.brainstorm("x", [], [".io"], CreativityLevel.WILD, 2)

        assert _domains(candidates) == ["pickle.io", "brine.io"]

    @pytest.mark.asyncio
    async def test_fallback_drops_invalid_keywords(self, rng):
        generator = CandidateGenerator(FakeAI(fail=True), rng=rng)

        candidates = await generator.brainstorm(
            "pickles", ["pickle jar", "brine"], [".com", ".io"], CreativityLevel.MODERATE, 6
        )

        assert _domains(candidates) == ["brine.com", "brine.io"]

    @pytest.mark.asyncio
    async def test_nothing_requested(self, rng):
        ai = FakeAI("pickle.io")
        generator = CandidateGenerator(ai, rng=rng)

        assert await generator.brainstorm("x", [], [".io"], CreativityLevel.WILD, 0) == []
        assert await generator.brainstorm("x", [], [], CreativityLevel.WILD, 5) == []
        assert ai.calls == []

    @pytest.mark.asyncio
    async def test_failure_falls_back_to_keywords(self, rng):
        generator = CandidateGenerator(FakeAI(fail=True), rng=rng)

        candidates = await generator.brainstorm(
            "pickles", ["pickle", "brine"], [".com", ".io", ".ai"], CreativityLevel.MODERATE, 6
        )

        assert _domains(candidates) == ["pickle.com", "pickle.io", "brine.com", "brine.io"]
        assert {c.strategy for c in candidates} == {Strategy.FALLBACK_KEYWORD.value}

    @pytest.mark.asyncio
    async def test_failure_without_keywords_uses_creative_words(self, rng, catalog):
        generator = CandidateGenerator(FakeAI(fail=True), rng=rng)

        candidates = await generator.brainstorm(
            "", [], list(catalog.all_tlds), CreativityLevel.WILD, 10
        )

        assert len(candidates) == 10
        assert {c.strategy for c in candidates} == {Strategy.CREATIVE_WORD.value}
        assert all(c.domain.endswith((".com", ".net")) for c in candidates)


class TestGenerate:

    @pytest.mark.asyncio
    async def test_direct_keywords_survive_with_empty_brainstorm(self, rng, catalog):
        ai = FakeAI("")
        generator = CandidateGenerator(ai, rng=rng)
        tlds = catalog.select_for_mode("competitive", KEYWORDS)

        candidates = await generator.generate(
            "artisanal pickle factory", KEYWORDS, tlds, "competitive", 45
        )

        direct = [c for c in candidates if c.strategy == Strategy.DIRECT_KEYWORD.value]
        assert {c.domain.split('.')[0] for c in direct} == {"artisanal", "pickle"}
        assert all('.' + c.domain.split('.', 1)[1] in tlds[:5] for c in direct)

    @pytest.mark.asyncio
    async def test_unique_valid_and_bounded(self, rng, catalog):
        ai = FakeAI("pickle.io\npickle.io\npickle.com\n--bad.io")
        generator = CandidateGenerator(ai, rng=rng)
        tlds = catalog.select_for_mode("standard", KEYWORDS)

        candidates = await generator.generate("artisanal pickle factory", KEYWORDS, tlds, "standard", 30)

        domains = _domains(candidates)
        assert len(domains) <= 30
        assert len(domains) == len(set(domains))
        assert all(validate_domain(d) for d in domains)

    @pytest.mark.asyncio
    async def test_competitive_asks_for_creative_suggestions(self, rng, catalog):
        ai = FakeAI("")
        generator = CandidateGenerator(ai, rng=rng)
        tlds = catalog.select_for_mode("competitive", KEYWORDS)

        await generator.generate("artisanal pickle factory", KEYWORDS, tlds, "competitive", 45)

        assert len(ai.calls) == 2
        assert ai.calls[0]["temperature"] == 1.0
        assert "Generate 15 highly creative domain names" in ai.calls[1]["prompt"]
        assert ai.calls[1]["temperature"] == 0.8

    @pytest.mark.asyncio
    async def test_standard_makes_single_request(self, rng, catalog):
        ai = FakeAI("")
        generator = CandidateGenerator(ai, rng=rng)

        await generator.generate("pickles", ["pickle"], catalog.select_for_mode("standard", []), "standard", 15)

        assert len(ai.calls) == 1

    @pytest.mark.asyncio
    async def test_text_generation_failure_still_returns_candidates(self, rng, catalog):
        generator = CandidateGenerator(FakeAI(fail=True), rng=rng)
        tlds = catalog.select_for_mode("competitive", KEYWORDS)

        candidates = await generator.generate(
            "artisanal pickle factory", KEYWORDS, tlds, "competitive", 45
        )

        strategies = {c.strategy for c in candidates}
        assert Strategy.FALLBACK_KEYWORD.value in strategies
        assert Strategy.LLM_CREATIVE.value not in strategies
        assert candidates
