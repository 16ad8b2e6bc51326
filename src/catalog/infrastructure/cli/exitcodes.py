"""Process exit codes for domain failures.

The codes echo the HTTP status a web layer would answer with
(404 not found, 412 precondition failed, 422 validation).
"""

from __future__ import annotations

import click

from catalog.domain.exceptions import DomainException

EXIT_DOMAIN_ERROR = 1
EXIT_NOT_FOUND = 4
EXIT_PRECONDITION_FAILED = 12
EXIT_VALIDATION = 22

_BY_KIND = {
    "not_found": EXIT_NOT_FOUND,
    "precondition_failed": EXIT_PRECONDITION_FAILED,
    "validation": EXIT_VALIDATION,
}


def exit_code_for(exc: DomainException) -> int:
    return _BY_KIND.get(exc.kind, EXIT_DOMAIN_ERROR)


class DomainCommandError(click.ClickException):
    """A ClickException whose exit code reflects the domain error kind."""

    def __init__(self, exc: DomainException) -> None:
        super().__init__(exc.message)
        self.exit_code = exit_code_for(exc)
