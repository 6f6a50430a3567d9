"""
Terminal output helpers.

Informational messages go to stdout, warnings and errors to stderr so that
machine readable output can be piped safely.
"""

import click


def display_info(message: str) -> None:
    click.echo(message)


def display_heading(message: str) -> None:
    click.echo(click.style(message, bold=True))


def display_warning(message: str) -> None:
    click.echo(click.style(message, fg="yellow"), err=True)


def display_error(message: str) -> None:
    click.echo(click.style(message, fg="red"), err=True)
