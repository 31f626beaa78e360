"""Token top-up computation for the token top-up report application."""
import logging
from collections import defaultdict
from typing import Dict, List, Sequence

from models.schemas import CompanyRecord, CompanyResult, ProcessedUser, UserRecord

# Get loggers
debug_logger = logging.getLogger('debug')


def group_users_by_company(users: Sequence[UserRecord]) -> Dict[int, List[UserRecord]]:
    """Map each company id to its users, ordered alphabetically by last name.

    Args:
        users: Validated user records

    Returns:
        dict: company id -> users sorted by ``last_name`` (ties keep input order)
    """
    grouped = defaultdict(list)
    for user in sorted(users, key=lambda u: u.last_name):
        grouped[user.company_id].append(user)
    return dict(grouped)


def is_email_eligible(company: CompanyRecord, user: UserRecord) -> bool:
    return company.email_status and user.email_status


def process_company(company: CompanyRecord, users: Sequence[UserRecord]) -> CompanyResult:
    """Top up the active users of a single company and classify them.

    Args:
        company: The company providing the top-up
        users: The company's users, already in output order

    Returns:
        CompanyResult: The classified users and the total amount topped up
    """
    users_emailed = []
    users_not_emailed = []
    total_top_ups = 0

    for user in users:
        # Inactive users are left out entirely
        if not user.active_status:
            continue

        processed = ProcessedUser(user=user, new_balance=user.tokens + company.top_up)
        total_top_ups += company.top_up

        if is_email_eligible(company, user):
            users_emailed.append(processed)
        else:
            users_not_emailed.append(processed)

    return CompanyResult(
        company=company,
        users_emailed=users_emailed,
        users_not_emailed=users_not_emailed,
        total_top_ups=total_top_ups,
    )


def process_top_ups(
    users: Sequence[UserRecord], companies: Sequence[CompanyRecord]
) -> List[CompanyResult]:
    """Compute the top-up results for every company with active users.

    Companies come out in ascending id order. Users whose ``company_id``
    matches no company are ignored, and companies without any active user
    are omitted.

    Args:
        users: Validated user records
        companies: Validated company records

    Returns:
        list: CompanyResult entries ordered by company id
    """
    users_by_company = group_users_by_company(users)
    results = []

    for company in sorted(companies, key=lambda c: c.id):
        result = process_company(company, users_by_company.get(company.id, []))
        if result.is_empty():
            debug_logger.debug(f"Skipping company {company.id}: no active users")
            continue
        results.append(result)

    return results


def summarize_results(results: Sequence[CompanyResult]) -> Dict[str, int]:
    """Count what a report run covered.

    Returns:
        dict: companies, users_emailed, users_not_emailed and total_top_ups
    """
    return {
        'companies': len(results),
        'users_emailed': sum(len(r.users_emailed) for r in results),
        'users_not_emailed': sum(len(r.users_not_emailed) for r in results),
        'total_top_ups': sum(r.total_top_ups for r in results),
    }
