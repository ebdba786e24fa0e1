"""Water abstraction charging and returns date library.

This package provides the calendar arithmetic shared by the licensing,
charging and returns services: financial years, abstraction periods,
billable days and date-range splitting.

Key modules:
- charging: Billable days, interval algebra, date range splitting
- returns: Returns cycles, abstraction period tests, required return lines
- conventions: Enumerations and default settings
- utils: Date parsing/formatting and day counting
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Main modules are imported via subpackages
    "charging",
    "returns",
    "conventions",
    "utils",
]
