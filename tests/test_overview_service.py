from __future__ import annotations

from types import SimpleNamespace

import pytest
from sqlalchemy.exc import OperationalError

from skillboard.errors import InvalidArgument, UpstreamFailure
from skillboard.services import overview_service
from skillboard.services.overview_service import (
    build_pagination,
    compute_overview,
    list_categories,
    sort_and_paginate,
)


def _profile(pid: int, name: str, teach=(), learn=()):
    return SimpleNamespace(
        id=pid,
        name=name,
        email=f"{name.lower()}@skills.edu",
        skills_to_teach=list(teach),
        skills_to_learn=list(learn),
    )


def _by_name(aggregates):
    return {aggregate.name: aggregate for aggregate in aggregates}


@pytest.fixture
def profiles():
    return [
        _profile(1, "Anna", teach=["Guitar", "Python"], learn=["Spanish"]),
        _profile(2, "Ben", teach=["Guitar"], learn=["Guitar", "Cooking"]),
        _profile(3, "Chen", teach=["Spanish"], learn=["Python", "Chess"]),
        _profile(4, "Dana", learn=["Python"]),
    ]


def test_guitar_counts_teachers_and_learners_separately():
    aggregates = compute_overview(
        [
            _profile(1, "Ana", teach=["Guitar"]),
            _profile(2, "Bo", teach=["Guitar"], learn=["Guitar"]),
        ]
    )

    guitar = _by_name(aggregates)["Guitar"]
    assert guitar.teachers_count == 2
    assert guitar.learners_count == 1
    assert [m.id for m in guitar.teachers] == [1, 2]
    # Same user may teach and learn the same skill.
    assert [m.id for m in guitar.learners] == [2]


def test_counts_always_match_member_lists(profiles):
    for aggregate in compute_overview(profiles):
        assert aggregate.teachers_count == len(aggregate.teachers)
        assert aggregate.learners_count == len(aggregate.learners)


def test_totals_are_conserved(profiles):
    aggregates = compute_overview(profiles)

    assert sum(a.teachers_count for a in aggregates) == sum(len(p.skills_to_teach) for p in profiles)
    assert sum(a.learners_count for a in aggregates) == sum(len(p.skills_to_learn) for p in profiles)


def test_aggregates_keep_first_seen_order(profiles):
    names = [a.name for a in compute_overview(profiles)]
    assert names == ["Guitar", "Python", "Spanish", "Cooking", "Chess"]


def test_member_carries_id_name_and_email(profiles):
    python = _by_name(compute_overview(profiles))["Python"]
    teacher = python.teachers[0]
    assert (teacher.id, teacher.name, teacher.email) == (1, "Anna", "anna@skills.edu")


def test_duplicate_names_in_one_users_list_count_once():
    aggregates = compute_overview(
        [_profile(1, "Solo", teach=["Guitar", "Guitar"], learn=["Drums", "Drums", "Drums"])]
    )

    by_name = _by_name(aggregates)
    assert by_name["Guitar"].teachers_count == 1
    assert len(by_name["Guitar"].teachers) == 1
    assert by_name["Drums"].learners_count == 1


def test_skill_names_are_case_sensitive():
    aggregates = compute_overview(
        [_profile(1, "A", teach=["guitar"]), _profile(2, "B", teach=["Guitar"])]
    )
    assert sorted(a.name for a in aggregates) == ["Guitar", "guitar"]


def test_blank_names_and_missing_lists_are_ignored():
    profile = SimpleNamespace(id=1, name="Empty", email=None, skills_to_teach=None, skills_to_learn=["", "Go"])
    aggregates = compute_overview([profile])
    assert [a.name for a in aggregates] == ["Go"]
    assert aggregates[0].learners[0].email is None


def test_sort_is_by_total_interest_with_stable_ties(profiles):
    result = sort_and_paginate(compute_overview(profiles), page=1, page_size=10)

    # Guitar 3, Python 3, Spanish 2, Cooking 1, Chess 1
    assert [a.name for a in result.skills] == ["Guitar", "Python", "Spanish", "Cooking", "Chess"]


def test_repeated_calls_return_identical_pages(profiles):
    first = sort_and_paginate(compute_overview(profiles), page=1, page_size=2)
    second = sort_and_paginate(compute_overview(profiles), page=1, page_size=2)
    assert [a.name for a in first.skills] == [a.name for a in second.skills]


def test_25_skills_paginate_into_three_pages():
    profile = _profile(1, "Many", teach=[f"Skill {i:02d}" for i in range(25)])
    aggregates = compute_overview([profile])

    page3 = sort_and_paginate(aggregates, page=3, page_size=10)

    assert len(page3.skills) == 5
    assert page3.pagination.total_pages == 3
    assert page3.pagination.total_items == 25
    assert page3.pagination.current_page == 3
    assert page3.pagination.has_next_page is False
    assert page3.pagination.has_prev_page is True


def test_pages_concatenate_to_the_full_sorted_list(profiles):
    aggregates = compute_overview(profiles)
    full = sort_and_paginate(aggregates, page=1, page_size=100).skills

    collected = []
    total_pages = sort_and_paginate(aggregates, page=1, page_size=2).pagination.total_pages
    for page in range(1, total_pages + 1):
        collected.extend(sort_and_paginate(aggregates, page=page, page_size=2).skills)

    assert [a.name for a in collected] == [a.name for a in full]


def test_out_of_range_page_is_empty_but_reports_true_total():
    profile = _profile(1, "Many", teach=[f"Skill {i}" for i in range(25)])
    result = sort_and_paginate(compute_overview([profile]), page=5, page_size=10)

    assert result.skills == []
    assert result.pagination.total_pages == 3
    assert result.pagination.current_page == 5
    assert result.pagination.has_next_page is False
    assert result.pagination.has_prev_page is True


def test_empty_store_still_has_one_page():
    result = sort_and_paginate([], page=1, page_size=10)
    assert result.skills == []
    assert result.pagination.total_pages == 1
    assert result.pagination.total_items == 0
    assert result.pagination.has_next_page is False
    assert result.pagination.has_prev_page is False


@pytest.mark.parametrize("page,page_size", [(0, 10), (-1, 10), (1, 0), (1, -5)])
def test_non_positive_paging_is_rejected(page, page_size):
    with pytest.raises(InvalidArgument):
        sort_and_paginate([], page=page, page_size=page_size)


def test_build_pagination_rounds_up():
    pagination = build_pagination(page=2, page_size=10, total_items=11)
    assert pagination.total_pages == 2
    assert pagination.has_next_page is False
    assert pagination.has_prev_page is True


def test_categories_are_sorted_distinct_behind_all(profiles):
    categories = list_categories(profiles)
    assert categories == ["all", "Chess", "Cooking", "Guitar", "Python", "Spanish"]


def test_categories_use_ordinal_order_and_fold_literal_all():
    categories = list_categories(
        [_profile(1, "A", teach=["banana", "Zebra", "all"], learn=["apple", "Zebra"])]
    )
    assert categories == ["all", "Zebra", "apple", "banana"]
    assert categories.count("all") == 1


def test_categories_of_empty_store():
    assert list_categories([]) == ["all"]


def test_get_skills_overview_scans_active_profiles(db_session, make_user):
    make_user("Anna", teach=["Guitar"])
    make_user("Ben", learn=["Guitar", "Chess"])
    make_user("Gone", teach=["Chess"], is_active=False)

    result = overview_service.get_skills_overview(db_session, page=1, page_size=10)

    by_name = _by_name(result.skills)
    assert by_name["Guitar"].teachers_count == 1
    assert by_name["Guitar"].learners_count == 1
    assert by_name["Chess"].teachers_count == 0
    assert result.pagination.total_items == 2


def test_get_skill_categories_reads_the_store(db_session, make_user):
    make_user("Anna", teach=["Guitar"], learn=["Art"])
    assert overview_service.get_skill_categories(db_session) == ["all", "Art", "Guitar"]


def test_store_failure_is_reported_as_upstream(db_session, monkeypatch):
    def _broken_query(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(db_session, "query", _broken_query)

    with pytest.raises(UpstreamFailure):
        overview_service.get_skills_overview(db_session, page=1, page_size=10)
