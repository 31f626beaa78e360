"""Main entry point for the token top-up report application."""
import sys
import argparse
import traceback

# Application modules
import config
from logger import setup_logging
from handlers.file_handler import load_companies, load_users
from handlers.report_handler import format_report, write_report
from handlers.topup_handler import process_top_ups, summarize_results
from models.exceptions import TopUpError


def build_parser():
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Top up company users' tokens and report who would be e-mailed."
    )
    parser.add_argument('--users_file', required=True, metavar='USERSFILE',
                        help="JSON file containing the users")
    parser.add_argument('--companies_file', required=True, metavar='COMPANIESFILE',
                        help="JSON file containing the companies")
    parser.add_argument('--output_file', default=None, metavar='OUTPUTFILE',
                        help=f"Report destination (default: {config.OUTPUT_FILE})")
    return parser


def run(users_file, companies_file, output_file):
    """Load both files, compute the top-ups and write the report.

    Args:
        users_file: Path to the users JSON file
        companies_file: Path to the companies JSON file
        output_file: Path of the report to write

    Returns:
        dict: Summary counts of the run

    Raises:
        TopUpError: If loading, validation or writing fails
    """
    companies = load_companies(companies_file)
    users = load_users(users_file)

    results = process_top_ups(users, companies)
    write_report(format_report(results), output_file)
    return summarize_results(results)


def main(argv=None):
    """Run the application from the command line.

    Returns:
        int: Process exit code
    """
    args = build_parser().parse_args(argv)
    output_file = args.output_file or config.OUTPUT_FILE

    try:
        loggers = setup_logging()
    except OSError as e:
        # No loggers yet, so report straight to the console
        print(f"CRITICAL: Cannot create {config.LOGS_FOLDER} directory: {str(e)}", file=sys.stderr)
        return 1

    app_logger = loggers['app']
    error_logger = loggers['error']

    app_logger.info(
        f"Processing e-mails for companies: {args.companies_file} and users: {args.users_file}"
    )

    try:
        summary = run(args.users_file, args.companies_file, output_file)
    except TopUpError as e:
        error_logger.error(str(e))
        return 1
    except Exception as e:
        stack_trace = traceback.format_exc()
        error_logger.critical(f"Unhandled exception: {str(e)}\n{stack_trace}")
        return 1

    app_logger.info(
        f"Reported {summary['companies']} companies: {summary['users_emailed']} users emailed, "
        f"{summary['users_not_emailed']} users not emailed, {summary['total_top_ups']} tokens topped up"
    )
    app_logger.info(f"Processing complete, see {output_file} for more details")
    return 0


if __name__ == "__main__":
    sys.exit(main())
