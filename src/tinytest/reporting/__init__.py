"""Console reporting of assertion failures and suite summaries."""

from tinytest.reporting.console import (
    format_failure,
    format_suite_summary,
    print_failure,
    report_suite,
)

__all__ = ["format_failure", "format_suite_summary", "print_failure", "report_suite"]
