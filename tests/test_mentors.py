"""Mentor registration: option validation and pending status."""

import pytest

from app.core.errors import Unauthenticated, ValidationFailed
from app.modules.mentors.schemas import MentorCreate
from app.modules.mentors.service import MentorService
from app.modules.profiles.service import ProfileService
from tests.fake_supabase import ALICE


def _application(**overrides):
    data = {
        "expertise": ["Housing Assistance", "Visa & Immigration"],
        "languages": ["English", "Japanese"],
        "availability": "weekends",
        "experience": "Lived in Osaka for six years",
        "bio": "Happy to help newcomers settle in",
    }
    data.update(overrides)
    return MentorCreate(**data)


def test_register_mentor_is_pending(db, alice):
    mentor = MentorService(alice, profiles=ProfileService(alice)).register_mentor(_application())

    assert mentor.status == "pending"
    assert mentor.user_id == ALICE
    assert db.rows("mentors")[0]["expertise"] == ["Housing Assistance", "Visa & Immigration"]
    assert len(db.rows("profiles")) == 1


@pytest.mark.parametrize("overrides", [
    {"expertise": []},
    {"languages": []},
    {"languages": ["Klingon"]},
    {"availability": "whenever"},
    {"experience": "  "},
    {"bio": ""},
])
def test_register_mentor_rejects_bad_input_before_backend(db, alice, overrides):
    with pytest.raises(ValidationFailed):
        MentorService(alice).register_mentor(_application(**overrides))
    assert db.calls == []


def test_register_mentor_unauthenticated(db, anonymous):
    with pytest.raises(Unauthenticated):
        MentorService(anonymous).register_mentor(_application())
    assert db.rows("mentors") == []
