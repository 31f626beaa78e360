"""Report rendering and output for the token top-up report application."""
import logging
from typing import Iterator, List, Sequence

from models.exceptions import WriteFailureError
from models.schemas import CompanyResult, ProcessedUser
from utils.file_operations import open_report_file

# Get loggers
app_logger = logging.getLogger('app')
debug_logger = logging.getLogger('debug')

COMPANY_INDENT = "  "
USER_INDENT = "    "
BALANCE_INDENT = "      "


def _user_lines(user: ProcessedUser) -> Iterator[str]:
    record = user.user
    yield f"{USER_INDENT}{record.last_name}, {record.first_name}, {record.email}"
    yield f"{BALANCE_INDENT}Previous Token Balance {user.previous_balance}"
    yield f"{BALANCE_INDENT}New Token Balance {user.new_balance}"


def _user_list_lines(header: str, users: Sequence[ProcessedUser]) -> Iterator[str]:
    # The header is printed even when the list is empty
    yield f"{COMPANY_INDENT}{header}"
    for user in users:
        yield from _user_lines(user)


def company_lines(result: CompanyResult) -> List[str]:
    """Render the block of report lines for one company."""
    company = result.company
    lines = [
        "",
        f"{COMPANY_INDENT}Company Id: {company.id}",
        f"{COMPANY_INDENT}Company Name: {company.name}",
    ]
    lines.extend(_user_list_lines("Users Emailed:", result.users_emailed))
    lines.extend(_user_list_lines("Users Not Emailed:", result.users_not_emailed))
    lines.append(f"{COMPANY_INDENT}Total amount of top ups for {company.name}: {result.total_top_ups}")
    return lines


def format_report(results: Sequence[CompanyResult]) -> str:
    """Render the full report text.

    Args:
        results: Company results in output order

    Returns:
        str: The report, one "\\n"-terminated line per entry
    """
    return "".join(
        f"{line}\n" for result in results for line in company_lines(result)
    )


def write_report(text: str, file_path: str) -> None:
    """Write the report text to its destination.

    Args:
        text: The formatted report
        file_path: Destination path

    Raises:
        WriteFailureError: If the destination cannot be opened or written
    """
    debug_logger.debug(f"Writing {len(text)} characters to {file_path}")
    try:
        with open_report_file(file_path) as report_file:
            report_file.write(text)
    except (OSError, UnicodeError) as e:
        raise WriteFailureError(file_path, str(e)) from e

    app_logger.info(f"Report written to {file_path}")
