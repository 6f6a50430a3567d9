from typing import Iterator

import pytest
from click.testing import CliRunner, Result


def assert_invoke_exited_with(result: Result, exit_code: int) -> None:
    msg = f"""
    Expected exit code: {exit_code}
    Actual exit code: {result.exit_code}
    Output: {result.output}
    """
    assert result.exit_code == exit_code, msg


def assert_invoke_ok(result: Result) -> None:
    assert_invoke_exited_with(result, 0)


@pytest.fixture()
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def cli_fs_runner(cli_runner: CliRunner) -> Iterator[CliRunner]:
    with cli_runner.isolated_filesystem():
        yield cli_runner
