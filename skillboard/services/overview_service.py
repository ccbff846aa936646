# skillboard/services/overview_service.py
"""
Skill Board - aggregation, pagination and category extraction.

Every request rescans all profiles and rebuilds the per-skill roster of
teachers and learners. Skill names are free text and compared with exact,
case-sensitive equality.

Ordering contract: aggregates are sorted by total interest
(teachers + learners) descending. The sort is stable, so skills with equal
interest keep the order in which their name was first seen during the
scan. Page N therefore always returns the same slice for unchanged data.
"""

import logging
import math
from typing import Dict, Iterable, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillboard import models
from skillboard.errors import InvalidArgument, UpstreamFailure
from skillboard.schemas.overview import (
    PageResult,
    Pagination,
    SkillAggregate,
    SkillMember,
)

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


# =====================================
# PROFILE SNAPSHOT
# =====================================

def load_profiles(db: Session) -> List[models.User]:
    """Read every active profile in a stable (id) order."""
    try:
        return (
            db.query(models.User)
            .filter(models.User.is_active.is_(True))
            .order_by(models.User.id.asc())
            .all()
        )
    except SQLAlchemyError as exc:
        logger.warning("Profile scan failed: %s", exc)
        raise UpstreamFailure("Profile store is unavailable") from exc


def _distinct_names(names) -> List[str]:
    # A user listing the same name twice still counts once for that skill.
    return [name for name in dict.fromkeys(names or []) if name]


def _member(profile) -> SkillMember:
    return SkillMember(id=profile.id, name=profile.name, email=profile.email)


# =====================================
# AGGREGATION ENGINE
# =====================================

def compute_overview(profiles: Iterable) -> List[SkillAggregate]:
    """
    Build one SkillAggregate per distinct skill name.

    Args:
        profiles: objects exposing ``id``, ``name``, ``email``,
            ``skills_to_teach`` and ``skills_to_learn``

    Returns:
        Aggregates in first-seen order of their skill name (unsorted)
    """
    aggregates: Dict[str, SkillAggregate] = {}

    def _get(name: str) -> SkillAggregate:
        aggregate = aggregates.get(name)
        if aggregate is None:
            aggregate = SkillAggregate(name=name)
            aggregates[name] = aggregate
        return aggregate

    for profile in profiles:
        member = _member(profile)
        for name in _distinct_names(profile.skills_to_teach):
            aggregate = _get(name)
            aggregate.teachers.append(member)
            aggregate.teachers_count += 1
        for name in _distinct_names(profile.skills_to_learn):
            aggregate = _get(name)
            aggregate.learners.append(member)
            aggregate.learners_count += 1

    return list(aggregates.values())


def build_pagination(page: int, page_size: int, total_items: int) -> Pagination:
    """Page metadata; ``page`` is reported as requested, never clamped."""
    total_pages = max(1, math.ceil(total_items / page_size))
    return Pagination(
        current_page=page,
        total_pages=total_pages,
        page_size=page_size,
        total_items=total_items,
        has_next_page=page < total_pages,
        has_prev_page=page > 1,
    )


def _validate_page_params(page: int, page_size: int) -> None:
    if page_size is None or page_size <= 0:
        raise InvalidArgument("limit must be a positive integer")
    if page is None or page <= 0:
        raise InvalidArgument("page must be a positive integer")


def sort_and_paginate(
    aggregates: List[SkillAggregate],
    page: int,
    page_size: int,
) -> PageResult:
    """
    Sort by popularity and cut out one page.

    A page past the end yields an empty ``skills`` list while
    ``pagination.total_pages`` still reports the real page count.

    Raises:
        InvalidArgument: page or page_size is not positive
    """
    _validate_page_params(page, page_size)

    ranked = sorted(aggregates, key=lambda a: a.total_interest, reverse=True)
    start = (page - 1) * page_size
    return PageResult(
        skills=ranked[start:start + page_size],
        pagination=build_pagination(page, page_size, len(ranked)),
    )


def get_skills_overview(db: Session, page: int = 1, page_size: int = 10) -> PageResult:
    _validate_page_params(page, page_size)
    profiles = load_profiles(db)
    result = sort_and_paginate(compute_overview(profiles), page, page_size)
    logger.debug(
        "Skill overview page %s/%s (%s skills from %s profiles)",
        page,
        result.pagination.total_pages,
        result.pagination.total_items,
        len(profiles),
    )
    return result


# =====================================
# CATEGORY EXTRACTOR
# =====================================

def list_categories(profiles: Iterable) -> List[str]:
    """Distinct skill names, ordinal-sorted, behind a single "all" entry."""
    names = set()
    for profile in profiles:
        names.update(name for name in profile.skills_to_teach or [] if name)
        names.update(name for name in profile.skills_to_learn or [] if name)
    names.discard(ALL_CATEGORIES)
    return [ALL_CATEGORIES, *sorted(names)]


def get_skill_categories(db: Session) -> List[str]:
    return list_categories(load_profiles(db))
