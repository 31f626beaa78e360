"""Tests for report rendering and writing."""

from pathlib import Path
from typing import Callable

import pytest

from handlers.report_handler import company_lines, format_report, write_report
from handlers.topup_handler import process_top_ups
from models.exceptions import WriteFailureError
from models.schemas import CompanyRecord, CompanyResult, UserRecord

ACME_REPORT = (
    "\n"
    "  Company Id: 1\n"
    "  Company Name: Acme\n"
    "  Users Emailed:\n"
    "    Zed, A, a@x.com\n"
    "      Previous Token Balance 10\n"
    "      New Token Balance 15\n"
    "  Users Not Emailed:\n"
    "    Ant, B, b@x.com\n"
    "      Previous Token Balance 20\n"
    "      New Token Balance 25\n"
    "  Total amount of top ups for Acme: 10\n"
)


@pytest.fixture
def acme_results(
    user_factory: Callable[..., UserRecord], company_factory: Callable[..., CompanyRecord]
) -> list[CompanyResult]:
    """Results of the Acme example."""
    users = [
        user_factory(id=1, last_name="Zed", first_name="A", email="a@x.com",
                     email_status=True, tokens=10),
        user_factory(id=2, last_name="Ant", first_name="B", email="b@x.com",
                     email_status=False, tokens=20),
    ]
    company = company_factory(id=1, name="Acme", top_up=5, email_status=True)
    return process_top_ups(users, [company])


class TestFormatReport:
    """Tests for the report text."""

    def test_acme_report(self, acme_results: list[CompanyResult]) -> None:
        """Test the exact text of the reference example."""
        assert format_report(acme_results) == ACME_REPORT

    def test_formatting_is_stable(self, acme_results: list[CompanyResult]) -> None:
        """Test that formatting twice yields identical text."""
        assert format_report(acme_results) == format_report(acme_results)

    def test_empty_lists_keep_headers(
        self, user_factory: Callable[..., UserRecord], company_factory: Callable[..., CompanyRecord]
    ) -> None:
        """Test that both list headers print even without users under them."""
        company = company_factory(id=4, name="Quiet", top_up=1, email_status=False)
        results = process_top_ups([user_factory(company_id=4, tokens=0)], [company])
        assert company_lines(results[0]) == [
            "",
            "  Company Id: 4",
            "  Company Name: Quiet",
            "  Users Emailed:",
            "  Users Not Emailed:",
            "    Lovelace, Ada, ada@example.com",
            "      Previous Token Balance 0",
            "      New Token Balance 1",
            "  Total amount of top ups for Quiet: 1",
        ]

    def test_multiple_companies_in_order(
        self, user_factory: Callable[..., UserRecord], company_factory: Callable[..., CompanyRecord]
    ) -> None:
        """Test that company blocks follow one another in id order."""
        companies = [company_factory(id=2, name="Beta"), company_factory(id=1, name="Alpha")]
        users = [user_factory(id=1, company_id=2), user_factory(id=2, company_id=1)]
        text = format_report(process_top_ups(users, companies))
        assert text.index("Company Name: Alpha") < text.index("Company Name: Beta")
        assert text.count("\n  Company Id: ") == 2

    def test_large_numbers_are_plain(
        self, user_factory: Callable[..., UserRecord], company_factory: Callable[..., CompanyRecord]
    ) -> None:
        """Test that integers render without separators."""
        results = process_top_ups(
            [user_factory(tokens=1234567)], [company_factory(top_up=1000)]
        )
        text = format_report(results)
        assert "      Previous Token Balance 1234567\n" in text
        assert "      New Token Balance 1235567\n" in text

    def test_no_results(self) -> None:
        """Test that nothing to report renders as empty text."""
        assert format_report([]) == ""


class TestWriteReport:
    """Tests for writing the report file."""

    def test_writes_text(self, tmp_path: Path) -> None:
        """Test that the report is written verbatim."""
        path = tmp_path / "output.txt"
        write_report(ACME_REPORT, str(path))
        assert path.read_bytes() == ACME_REPORT.encode("utf-8")

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        """Test that a previous report is replaced."""
        path = tmp_path / "output.txt"
        path.write_text("stale", encoding="utf-8")
        write_report("", str(path))
        assert path.read_text(encoding="utf-8") == ""

    def test_unwritable_destination(self, tmp_path: Path) -> None:
        """Test that a destination that cannot be opened raises WriteFailureError."""
        path = tmp_path / "missing_dir" / "output.txt"
        with pytest.raises(WriteFailureError) as exc_info:
            write_report(ACME_REPORT, str(path))
        assert exc_info.value.path == str(path)
        assert str(path) in str(exc_info.value)

    def test_unencodable_text(
        self,
        tmp_path: Path,
        user_factory: Callable[..., UserRecord],
        company_factory: Callable[..., CompanyRecord],
    ) -> None:
        """Test that a name the report encoding cannot represent raises WriteFailureError."""
        results = process_top_ups([user_factory(first_name="\ud800")], [company_factory()])
        path = tmp_path / "output.txt"
        with pytest.raises(WriteFailureError) as exc_info:
            write_report(format_report(results), str(path))
        assert "surrogates not allowed" in str(exc_info.value)

    def test_directory_destination(self, tmp_path: Path) -> None:
        """Test that a directory cannot be used as the report file."""
        with pytest.raises(WriteFailureError):
            write_report(ACME_REPORT, str(tmp_path))
