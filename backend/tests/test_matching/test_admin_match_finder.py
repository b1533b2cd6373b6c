"""Tests for admin job<->candidate match lookups."""

from models.responses import CandidateMatch, JobMatch
from services.matching.admin_match_finder import AdminMatchFinder, job_skill_list, skill_breakdown


class TestMatchesForJob:
    def setup_method(self):
        self.finder = AdminMatchFinder()

    def test_empty_candidates(self, job_factory):
        assert self.finder.matches_for_job(job_factory(), []) == []

    def test_sorted_by_score(self, job_factory, candidate_factory):
        job = job_factory(skills="python, sql, docker", location="Pune")
        strong = candidate_factory(id="strong", skills=["python", "sql", "docker"], address="Pune")
        weak = candidate_factory(id="weak", skills=["cobol"], address="Chennai")
        middle = candidate_factory(id="middle", skills=["python"])

        matches = self.finder.matches_for_job(job, [weak, middle, strong])
        assert [m.candidate_id for m in matches] == ["strong", "middle", "weak"]
        assert all(isinstance(m, CandidateMatch) for m in matches)
        assert matches[0].score > matches[1].score > matches[2].score

    def test_top_ten_only(self, job_factory, candidate_factory):
        candidates = [candidate_factory(id=i) for i in range(25)]
        assert len(self.finder.matches_for_job(job_factory(), candidates)) == 10

    def test_limit_override(self, job_factory, candidate_factory):
        candidates = [candidate_factory(id=i) for i in range(25)]
        assert len(self.finder.matches_for_job(job_factory(), candidates, limit=3)) == 3

    def test_zero_limit_returns_nothing(self, job_factory, candidate_factory):
        candidates = [candidate_factory(id=i) for i in range(25)]
        assert self.finder.matches_for_job(job_factory(), candidates, limit=0) == []

    def test_ignores_eligibility(self, job_factory, candidate_factory):
        closed = job_factory(is_active=False, fulfilled=True, created_at=None)
        assert len(self.finder.matches_for_job(closed, [candidate_factory()])) == 1

    def test_skill_breakdown_is_verbatim(self, job_factory, candidate_factory):
        job = job_factory(skills="Python, SQL")
        candidate = candidate_factory(skills=["Python", "sql", "Go"])

        match = self.finder.matches_for_job(job, [candidate])[0]
        assert [(s.name, s.matches) for s in match.skills_match] == [
            ("Python", True),
            ("sql", False),
            ("Go", False),
        ]

    def test_placeholder_flags(self, job_factory, candidate_factory):
        match = self.finder.matches_for_job(job_factory(), [candidate_factory()])[0]
        assert match.experience_match is True
        assert match.salary_match is True

    def test_candidate_not_aliased(self, job_factory, candidate_factory):
        candidate = candidate_factory(skills=["python"])
        match = self.finder.matches_for_job(job_factory(), [candidate])[0]
        match.candidate.skills.append("rust")
        assert candidate.skills == ["python"]


class TestMatchesForCandidate:
    def setup_method(self):
        self.finder = AdminMatchFinder()

    def test_empty_jobs(self, candidate_factory):
        assert self.finder.matches_for_candidate(candidate_factory(), []) == []

    def test_sorted_and_truncated(self, job_factory, candidate_factory):
        candidate = candidate_factory(skills=["react"], address="Remote")
        jobs = [job_factory(id=i, skills="java, go", location="Delhi") for i in range(12)]
        jobs.append(job_factory(id="best", skills="react", location="Remote"))

        matches = self.finder.matches_for_candidate(candidate, jobs)
        assert len(matches) == 10
        assert isinstance(matches[0], JobMatch)
        assert matches[0].job_id == "best"
        assert matches[0].job.skills == "react"

    def test_uses_same_score_as_scorer(self, scenario_job, scenario_candidate):
        matches = self.finder.matches_for_candidate(scenario_candidate, [scenario_job])
        assert matches[0].score == 89


def test_job_skill_list(job_factory):
    assert job_skill_list(job_factory(skills=" React , Node,, ")) == ["React", "Node"]
    assert job_skill_list(job_factory()) == []


def test_skill_breakdown_without_candidate_skills(job_factory, candidate_factory):
    assert skill_breakdown(job_factory(skills="python"), candidate_factory()) == []
