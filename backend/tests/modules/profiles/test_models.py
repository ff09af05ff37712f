import pytest
from datetime import date
from pydantic import ValidationError

from modules.profiles.models import (
    EducationRequest,
    Experience,
    ExperienceRequest,
    ProfileRequest,
)


class TestProfileRequest:
    def test_skill_list_trims_and_drops_empty(self):
        request = ProfileRequest(status="Dev", skills=" a, b ,, c ")
        assert request.skill_list() == ["a", "b", "c"]

    def test_social_links_only_set_networks(self):
        request = ProfileRequest(status="Dev", skills="a", youtube="y", linkedin="")
        assert request.social_links() == {"youtube": "y"}

    def test_required_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            ProfileRequest(status=" ")
        assert [e["msg"] for e in exc_info.value.errors()] == [
            "Status is required",
            "Skills are required",
        ]

    def test_skills_with_no_items(self):
        with pytest.raises(ValidationError) as exc_info:
            ProfileRequest(status="Dev", skills=",,,")
        assert [e["msg"] for e in exc_info.value.errors()] == ["Skills are required"]


class TestExperience:
    def test_entry_gets_id_and_serializes_from(self):
        entry = ExperienceRequest(title="Engineer", company="Acme", **{"from": "2020-01-01"}).to_entry()

        data = entry.model_dump(mode="json", by_alias=True)

        assert data["id"]
        assert data["from"] == "2020-01-01"
        assert "from_date" not in data

    def test_parses_stored_row(self):
        entry = Experience(**{"id": "e", "title": "T", "company": "C", "from": "2019-05-01"})
        assert entry.from_date == date(2019, 5, 1)

    def test_invalid_date(self):
        with pytest.raises(ValidationError):
            ExperienceRequest(title="T", company="C", **{"from": "yesterday"})


class TestEducationRequest:
    def test_entry(self):
        entry = EducationRequest(
            school="MIT", degree="BSc", fieldofstudy="CS", from_date=date(2014, 9, 1), current=True
        ).to_entry()
        assert entry.current is True
        assert entry.to is None
