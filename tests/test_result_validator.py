import json

import pytest

from services.errors import ResponseParseError
from services.response_extractor import extract
from services.result_validator import NameCandidate, normalize


def test_fenced_single_candidate_round_trip() -> None:
    raw = '```json\n[{"name":"A","keywords":["a"],"seoScore":90}]\n```'

    assert normalize(extract(raw)) == [NameCandidate(name="A", keywords=["a"], seo_score=90)]


def test_normalize_preserves_order(ten_candidates: list[dict[str, object]], ten_candidates_json: str) -> None:
    candidates = normalize(ten_candidates_json)

    assert [item.name for item in candidates] == [item["name"] for item in ten_candidates]


@pytest.mark.parametrize(
    "text",
    [
        "Sorry, I cannot comply.",
        "",
        '[{"name": "A", "keywords": ["a"], "seoScore": 90}',
        '{"name": "A", "keywords": ["a"], "seoScore": 90}',
        "[]",
        '["A"]',
        '[{"keywords": ["a"], "seoScore": 90}]',
        '[{"name": "  ", "keywords": ["a"], "seoScore": 90}]',
        '[{"name": "A", "keywords": "a", "seoScore": 90}]',
        '[{"name": "A", "keywords": [1], "seoScore": 90}]',
        '[{"name": "A", "keywords": ["a"], "seoScore": "90"}]',
        '[{"name": "A", "keywords": ["a"], "seoScore": 90.5}]',
        '[{"name": "A", "keywords": ["a"], "seoScore": true}]',
        '[{"name": "A", "keywords": ["a"]}]',
    ],
)
def test_normalize_rejects_unusable_text(text: str) -> None:
    with pytest.raises(ResponseParseError):
        normalize(text)


def test_one_bad_candidate_fails_the_whole_response(ten_candidates: list[dict[str, object]]) -> None:
    ten_candidates[7]["seoScore"] = None

    with pytest.raises(ResponseParseError):
        normalize(json.dumps(ten_candidates))


def test_integral_float_scores_are_accepted() -> None:
    [candidate] = normalize('[{"name": "A", "keywords": ["a"], "seoScore": 88.0}]')

    assert candidate.seo_score == 88
    assert isinstance(candidate.seo_score, int)


def test_out_of_band_scores_are_forwarded(caplog: pytest.LogCaptureFixture) -> None:
    [candidate] = normalize('[{"name": "A", "keywords": ["a"], "seoScore": 120}]')

    assert candidate.seo_score == 120
    assert "outside 70-100" in caplog.text


def test_strings_are_stripped_and_blank_keywords_dropped() -> None:
    [candidate] = normalize('[{"name": " A ", "keywords": [" a ", "", "b"], "seoScore": 75}]')

    assert candidate == NameCandidate(name="A", keywords=["a", "b"], seo_score=75)
