"""Tests for requirement-matching scoring against job descriptions."""

import pytest
from pydantic import ValidationError

from models.schemas.job_requirement import JobRequirement, RequirementType
from models.schemas.scored_applicant import RequirementScore
from services.requirement_extractor import extract_requirements
from services.requirement_matcher import (
    get_top_applicants_by_job_description,
    rank_by_requirements,
    requirement_matches,
    score_applicant_by_requirements,
)

SAMPLE_JD = (
    "We need a Senior Software Engineer with 5+ years experience in React and "
    "JavaScript. Bachelor's degree required."
)
LEGAL_JD = "Seeking an attorney with a law degree and 3 years of experience in litigation."


def _req(type_: str, value: str, importance: int = 5) -> JobRequirement:
    return JobRequirement(type=RequirementType(type_), value=value, importance=importance)


class TestSkillMatching:
    def test_bidirectional(self, frontend_dev):
        assert requirement_matches(frontend_dev, _req("skill", "React"))
        assert requirement_matches(frontend_dev, _req("skill", "redux toolkit"))
        assert not requirement_matches(frontend_dev, _req("skill", "JavaScript"))

    def test_no_skills(self, blank_applicant):
        assert not requirement_matches(blank_applicant, _req("skill", "React"))


class TestEducationMatching:
    def test_exact(self, frontend_dev):
        assert requirement_matches(frontend_dev, _req("education", "Bachelor's Degree"))

    def test_overqualified(self, phd_scientist, attorney):
        assert requirement_matches(phd_scientist, _req("education", "Bachelor's Degree"))
        assert requirement_matches(phd_scientist, _req("education", "Master's Degree"))
        assert requirement_matches(attorney, _req("education", "Master's Degree"))

    def test_underqualified(self, frontend_dev):
        assert not requirement_matches(frontend_dev, _req("education", "Master's Degree"))

    def test_phd_and_jd_are_siblings(self, phd_scientist, attorney):
        assert not requirement_matches(phd_scientist, _req("education", "Juris Doctor (J.D)"))
        assert not requirement_matches(attorney, _req("education", "Ph.D."))

    def test_lower_levels_only_exact(self, applicant_factory):
        masters = applicant_factory("m@example.com", highest_level="Master's Degree")
        assert not requirement_matches(masters, _req("education", "Associate's Degree"))
        assert not requirement_matches(masters, _req("education", "High School Diploma"))

    def test_missing_level(self, blank_applicant):
        assert not requirement_matches(blank_applicant, _req("education", "Bachelor's Degree"))


class TestExperienceMatching:
    def test_years_boundary(self, applicant_factory):
        applicant = applicant_factory("y@example.com", roles=["A", "B", "C", "D"])  # 6.0 years
        assert requirement_matches(applicant, _req("experience", "6+ years of experience"))
        assert not requirement_matches(applicant, _req("experience", "7+ years of experience"))

    def test_years_without_number(self, frontend_dev):
        assert not requirement_matches(frontend_dev, _req("experience", "several years of experience"))

    def test_role_keyword(self, frontend_dev):
        assert requirement_matches(frontend_dev, _req("experience", "engineer"))
        assert requirement_matches(frontend_dev, _req("experience", "DEVELOPER"))
        assert not requirement_matches(frontend_dev, _req("experience", "senior"))

    def test_no_work_history(self, blank_applicant):
        assert not requirement_matches(blank_applicant, _req("experience", "developer"))
        assert not requirement_matches(blank_applicant, _req("experience", "1+ years of experience"))
        assert requirement_matches(blank_applicant, _req("experience", "0+ years of experience"))


class TestScoreByRequirements:
    def test_sample_description(self, frontend_dev):
        result = score_applicant_by_requirements(frontend_dev, extract_requirements(SAMPLE_JD))
        assert isinstance(result, RequirementScore)
        # matched: React(2), Bachelor's(6), engineer(7) out of 34
        assert result.score == 44.1
        assert [r.value for r in result.matched_requirements] == [
            "React", "Bachelor's Degree", "engineer",
        ]

    def test_empty_requirements(self, frontend_dev):
        result = score_applicant_by_requirements(frontend_dev, [])
        assert result.score == 0
        assert result.matched_requirements == []

    def test_all_matched(self, attorney):
        result = score_applicant_by_requirements(attorney, extract_requirements(LEGAL_JD))
        assert result.score == 100.0

    def test_rounds_half_up(self, frontend_dev):
        reqs = [_req("skill", "React", 1), _req("skill", "Go", 15)]
        assert score_applicant_by_requirements(frontend_dev, reqs).score == 6.3

    @pytest.mark.parametrize("description", [SAMPLE_JD, LEGAL_JD, "", "Python machine learning scientist, PhD"])
    def test_score_bounds(self, description, frontend_dev, attorney, phd_scientist, blank_applicant):
        reqs = extract_requirements(description)
        for applicant in (frontend_dev, attorney, phd_scientist, blank_applicant):
            score = score_applicant_by_requirements(applicant, reqs).score
            assert 0 <= score <= 100

    @pytest.mark.parametrize("importance", [0, -5])
    def test_rejects_non_positive_importance(self, importance, frontend_dev):
        with pytest.raises(ValidationError):
            _req("skill", "Cobol", importance)
        reqs = [_req("skill", "React", 10), _req("skill", "Cobol", 5)]
        assert score_applicant_by_requirements(frontend_dev, reqs).score == 66.7

    def test_matched_is_subset_in_input_order(self, phd_scientist):
        reqs = extract_requirements("Python machine learning scientist, PhD")
        matched = score_applicant_by_requirements(phd_scientist, reqs).matched_requirements
        assert [r for r in reqs if r in matched] == matched


class TestRanking:
    def test_legal_ranking(self, frontend_dev, attorney, phd_scientist):
        ranked = get_top_applicants_by_job_description([phd_scientist, frontend_dev, attorney], LEGAL_JD)
        assert [s.applicant.email for s in ranked] == [
            "attorney@example.com", "frontend@example.com", "scientist@example.com",
        ]
        assert ranked[0].score == 100.0
        assert ranked[1].score == 21.7
        assert ranked[2].score == 0
        assert all(s.breakdown is None for s in ranked)

    def test_returns_whole_roster(self, frontend_dev, attorney, phd_scientist, blank_applicant):
        ranked = get_top_applicants_by_job_description(
            [frontend_dev, attorney, phd_scientist, blank_applicant], SAMPLE_JD,
        )
        assert len(ranked) == 4

    def test_ties_keep_input_order(self, phd_scientist, blank_applicant):
        ranked = rank_by_requirements([blank_applicant, phd_scientist], [])
        assert [s.applicant.email for s in ranked] == ["blank@example.com", "scientist@example.com"]

    def test_empty_description(self, frontend_dev, attorney):
        ranked = get_top_applicants_by_job_description([frontend_dev, attorney], "")
        assert [s.score for s in ranked] == [0, 0]
        assert [s.applicant for s in ranked] == [frontend_dev, attorney]
