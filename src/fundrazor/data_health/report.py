"""Data-quality report builder.

Pure computation over a person snapshot plus three counts gathered by the
repository. Scoring rules:

- missing email / phone: null or blank after trimming
- incomplete profile: neither organization name nor wealth band
- complete profile: email AND phone AND (organization OR wealth band)
- overall health: 100 - 2*missing_emails - missing_phones
  - incomplete_profiles - 5*duplicates, clamped to [0, 100]

An empty person population is defined as fully healthy.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Protocol

from src.fundrazor.data_health.schemas import (
    ActionItem,
    CheckStatus,
    DataHealthReport,
    Freshness,
    HealthMetrics,
    QualityChecks,
)

# (warning_below) thresholds: 0 -> Passing, < threshold -> Warning, else Failing
EMAIL_WARNING_BELOW = 5
PHONE_WARNING_BELOW = 10
PROFILE_WARNING_BELOW = 10
DUPLICATE_WARNING_BELOW = 3

EMAIL_PENALTY = 2
PHONE_PENALTY = 1
PROFILE_PENALTY = 1
DUPLICATE_PENALTY = 5


class PersonContact(Protocol):
    """The person fields the report looks at."""

    primary_email: str | None
    primary_phone: str | None
    organization_name: str | None
    wealth_band: str | None


def _has_text(value: str | None) -> bool:
    return bool(value) and value.strip() != ""


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def check_status(count: int, warning_below: int) -> CheckStatus:
    if count == 0:
        return CheckStatus.PASSING
    if count < warning_below:
        return CheckStatus.WARNING
    return CheckStatus.FAILING


def overall_health(
    missing_emails: int, missing_phones: int, incomplete_profiles: int, duplicate_count: int
) -> int:
    raw = (
        100
        - EMAIL_PENALTY * missing_emails
        - PHONE_PENALTY * missing_phones
        - PROFILE_PENALTY * incomplete_profiles
        - DUPLICATE_PENALTY * duplicate_count
    )
    return _round_half_up(min(100, max(0, raw)))


def build_action_items(
    missing_emails: int, unassigned_opportunities: int, duplicate_count: int
) -> list[ActionItem]:
    """Action items in fixed order: emails, unassigned opportunities, duplicates."""
    items: list[ActionItem] = []
    if missing_emails > 0:
        items.append(ActionItem(
            id="missing-emails",
            title=f"{missing_emails} donors missing email addresses",
            description="Update contact information to improve engagement",
        ))
    if unassigned_opportunities > 0:
        items.append(ActionItem(
            id="unassigned-opps",
            title=f"{unassigned_opportunities} opportunities without owners",
            description="Assign portfolio managers to track these prospects",
        ))
    if duplicate_count > 0:
        items.append(ActionItem(
            id="duplicates",
            title=f"{duplicate_count} potential duplicate records detected",
            description="Review and merge duplicate donor profiles",
        ))
    return items


def build_report(
    persons: Iterable[PersonContact],
    *,
    has_recent_interactions: bool,
    unassigned_opportunities: int,
    duplicate_count: int,
) -> DataHealthReport:
    """Compute the data-health report.

    Args:
        persons: Every person record (only contact/profile fields are read).
        has_recent_interactions: Whether any interaction falls inside the
            freshness window.
        unassigned_opportunities: Opportunities with a null or empty owner.
        duplicate_count: Case-insensitive "first last" name groups having
            more than one member.
    """
    total = 0
    missing_emails = 0
    missing_phones = 0
    incomplete_profiles = 0
    complete_profiles = 0

    for person in persons:
        total += 1
        has_email = _has_text(person.primary_email)
        has_phone = _has_text(person.primary_phone)
        has_org_or_wealth = bool(person.organization_name) or bool(person.wealth_band)

        if not has_email:
            missing_emails += 1
        if not has_phone:
            missing_phones += 1
        if not has_org_or_wealth:
            incomplete_profiles += 1
        if has_email and has_phone and has_org_or_wealth:
            complete_profiles += 1

    profile_completeness = (
        _round_half_up(complete_profiles / total * 100) if total > 0 else 100
    )

    return DataHealthReport(
        metrics=HealthMetrics(
            overall_health=overall_health(
                missing_emails, missing_phones, incomplete_profiles, duplicate_count
            ),
            profile_completeness=profile_completeness,
            missing_emails=missing_emails,
            data_freshness=Freshness.GOOD if has_recent_interactions else Freshness.NEEDS_ATTENTION,
        ),
        quality_checks=QualityChecks(
            email_validation=check_status(missing_emails, EMAIL_WARNING_BELOW),
            phone_formatting=check_status(missing_phones, PHONE_WARNING_BELOW),
            address_completeness=check_status(incomplete_profiles, PROFILE_WARNING_BELOW),
            duplicate_detection=check_status(duplicate_count, DUPLICATE_WARNING_BELOW),
        ),
        action_items=build_action_items(
            missing_emails, unassigned_opportunities, duplicate_count
        ),
    )
