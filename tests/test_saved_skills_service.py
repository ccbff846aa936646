from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from skillboard.errors import InvalidArgument, NotAuthenticated, UpstreamFailure
from skillboard.models.user import SavedSkill
from skillboard.services.saved_skills_service import list_saved_skills, toggle_saved_skill


def _seed_saved(db, user, names):
    for name in names:
        db.add(SavedSkill(user_id=user.id, skill_name=name))
    db.commit()


def test_toggle_removes_then_restores(db_session, make_user):
    user = make_user("Saver")
    _seed_saved(db_session, user, ["A", "B"])

    assert toggle_saved_skill(db_session, user, "B") == ["A"]
    assert toggle_saved_skill(db_session, user, "B") == ["A", "B"]


def test_toggle_twice_returns_to_original_list(db_session, make_user):
    user = make_user("Pair")
    _seed_saved(db_session, user, ["Guitar", "Chess"])
    before = list_saved_skills(db_session, user.id)

    toggle_saved_skill(db_session, user, "Python")
    after = toggle_saved_skill(db_session, user, "Python")

    assert after == before


def test_toggle_appends_in_save_order(db_session, make_user):
    user = make_user("Order")
    toggle_saved_skill(db_session, user, "Zulu")
    toggle_saved_skill(db_session, user, "Alpha")
    assert list_saved_skills(db_session, user.id) == ["Zulu", "Alpha"]
    assert user.saved_skills == ["Zulu", "Alpha"]


def test_saved_lists_are_per_user(db_session, make_user):
    one = make_user("One")
    two = make_user("Two")
    toggle_saved_skill(db_session, one, "Guitar")
    assert list_saved_skills(db_session, two.id) == []


def test_toggle_requires_user(db_session):
    with pytest.raises(NotAuthenticated):
        toggle_saved_skill(db_session, None, "Guitar")


@pytest.mark.parametrize("name", [None, "", "   "])
def test_toggle_rejects_empty_name(db_session, make_user, name):
    user = make_user("Blank")
    with pytest.raises(InvalidArgument):
        toggle_saved_skill(db_session, user, name)


def test_toggle_rejects_name_longer_than_column(db_session, make_user):
    user = make_user("Verbose")
    with pytest.raises(InvalidArgument):
        toggle_saved_skill(db_session, user, "x" * 256)
    assert list_saved_skills(db_session, user.id) == []

    assert toggle_saved_skill(db_session, user, "y" * 255) == ["y" * 255]


def test_concurrent_add_does_not_duplicate(db_session, make_user, monkeypatch):
    user = make_user("Racer")
    original_commit = db_session.commit
    calls = {"count": 0}

    def _commit_after_rival_insert():
        # Another request saved the same name between our delete and insert.
        if calls["count"] == 0:
            calls["count"] += 1
            db_session.rollback()
            db_session.add(SavedSkill(user_id=user.id, skill_name="Guitar"))
            original_commit()
            db_session.add(SavedSkill(user_id=user.id, skill_name="Guitar"))
        return original_commit()

    monkeypatch.setattr(db_session, "commit", _commit_after_rival_insert)

    assert toggle_saved_skill(db_session, user, "Guitar") == ["Guitar"]


def test_store_failure_is_upstream(db_session, make_user, monkeypatch):
    user = make_user("Offline")

    def _broken_commit():
        raise OperationalError("COMMIT", {}, Exception("server closed the connection"))

    monkeypatch.setattr(db_session, "commit", _broken_commit)

    with pytest.raises(UpstreamFailure):
        toggle_saved_skill(db_session, user, "Guitar")
