"""
Scoring heuristics
"""
import pytest

from brandstorm_domains.core.models import DomainResult
from brandstorm_domains.services.scorer import (
    calculate_creativity_score,
    generate_standout_reason,
    is_pronounceable,
    score_domain,
)


def _result(domain, strategy, score):
    return DomainResult(
        domain=domain,
        strategy=strategy,
        tld=domain.rsplit('.', 1)[-1],
        score=score
    )


class TestScoreDomain:

    def test_two_letter_base(self):
        # 3 - 1 (length) + 2 (.com) - 0.5 (no keyword) + 1 (pronounceable) - 2 (short)
        assert score_domain("ab.com", "unknown-strategy", []) == 2.5

    def test_clamps_to_floor_after_summing(self):
        # Sum is -0.5 before clamping
        assert score_domain("ab.xyz", "number-substitution", []) == 1.0

    def test_clamps_to_ceiling(self):
        assert score_domain("pickle.com", "direct-keyword", ["pickle"]) == 10.0

    def test_partial_keyword_match(self):
        assert score_domain("pickleflow.io", "creative-combination", ["pickle"]) == 7.5

    def test_no_vowel_penalties(self):
        assert score_domain("pckl.com", "vowel-removal", ["pickle"]) == 4.0

    def test_digit_penalty_blocks_bonus(self):
        assert score_domain("gre8.io", "number-substitution", ["great"]) == 4.5

    def test_repeated_characters(self):
        assert score_domain("buzzzzz.com", "unknown-strategy", []) == 4.5

    def test_keyword_match_is_case_insensitive(self):
        assert score_domain("Pickle.com", "direct-keyword", ["PICKLE"]) == 10.0

    @pytest.mark.parametrize("domain,strategy", [
        ("pickle.com", "direct-keyword"),
        ("x1-y2-z3-very-long-name.zz", "llm-creative"),
        ("genera.tor", "word-slicing"),
    ])
    def test_deterministic_and_bounded(self, domain, strategy):
        first = score_domain(domain, strategy, ["pickle", "generator"])
        second = score_domain(domain, strategy, ["pickle", "generator"])

        assert first == second
        assert 1.0 <= first <= 10.0
        assert (first * 2).is_integer()


def test_is_pronounceable():
    assert is_pronounceable("banana")
    assert not is_pronounceable("rhythm")
    assert not is_pronounceable("aeiou")
    assert not is_pronounceable("")


class TestCreativityScore:

    def test_empty_results_score_zero(self):
        assert calculate_creativity_score([]) == 0.0

    def test_combines_strategies_scores_and_tlds(self):
        results = [
            _result("pickle.com", "direct-keyword", 8),
            _result("pictory.io", "portmanteau", 6),
        ]

        assert calculate_creativity_score(results) == pytest.approx(4 + 3.5 + 2 / 3)

    def test_capped_at_ten(self):
        strategies = ["direct-keyword", "portmanteau", "word-slicing", "vowel-removal", "llm-creative"]
        results = [_result(f"name{i}.com", s, 9) for i, s in enumerate(strategies)]

        assert calculate_creativity_score(results) == 10.0


class TestStandoutReason:

    def test_strategy_templates_first(self):
        assert generate_standout_reason("pickle.ai", "llm-intelligent-tld") == (
            "AI-brainstormed combination with ai TLD - intelligent TLD selection"
        )
        assert generate_standout_reason("pickle.io", "direct-keyword") == (
            'Direct keyword "pickle" with io TLD - clear and memorable'
        )

    def test_tld_templates(self):
        assert generate_standout_reason("pickle.ai", "portmanteau") == (
            "Perfect AI TLD match for tech business"
        )
        assert generate_standout_reason("brine.coffee", "llm-creative") == (
            "Unique coffee TLD - stands out from competition"
        )
        assert generate_standout_reason("brine.club", "llm-creative") == (
            "Fun and memorable club TLD - great for branding"
        )

    def test_generic_template(self):
        assert generate_standout_reason("brine.zz", "portmanteau") == (
            "Creative combination with zz TLD"
        )
