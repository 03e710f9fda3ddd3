"""CLI tests for the new command: argument handling, exit codes and output."""

import os

import pytest

from fake_prompter import FakePrompter
from newcli.cli import main
from newcli.scaffold.process_runner import ProcessResult
from template_fixtures import read_text, staging_dirs, write_files


@pytest.fixture
def cli_env(workspace, fake_runner, monkeypatch):
    """Run main() inside workspace with fake git/bun and a non-interactive prompter."""
    prompter = FakePrompter(interactive=False)
    monkeypatch.chdir(workspace)
    monkeypatch.delenv("NEW_TEMPLATE_REPO", raising=False)
    monkeypatch.setattr("newcli.cli.ProcessRunner", lambda: fake_runner)
    monkeypatch.setattr("newcli.cli.Prompter", lambda: prompter)
    return workspace, fake_runner, prompter


def _run(argv):
    """Call main(argv) and return its exit code, whether returned or raised."""
    try:
        return main(argv)
    except SystemExit as e:
        return e.code


@pytest.mark.unit
class TestHelpAndVersion:

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help_exits_zero_and_lists_options(self, flag, capsys):
        assert _run([flag]) == 0
        out = capsys.readouterr().out
        for option in ("--force", "--path", "--no-install", "--version"):
            assert option in out
        assert "--template" not in out

    @pytest.mark.parametrize("flag", ["-v", "--version"])
    def test_version_exits_zero(self, flag, capsys):
        assert _run([flag]) == 0
        assert capsys.readouterr().out.strip()


@pytest.mark.unit
class TestArgumentErrors:

    @pytest.mark.parametrize("argv, message", [
        (["app", "--path", "dir"], "Use either a project name argument or --path, not both."),
        (["a", "b"], "Only one project name can be provided."),
        (["--path", "a", "-p", "b"], "Path can only be provided once."),
        (["--path", ""], "Path must not be empty."),
        (["--path="], "Path must not be empty."),
        (["--path", "--force"], "Missing value for --path."),
        (["--bogus"], "No such option: --bogus"),
        (["--path"], "requires an argument"),
    ])
    def test_reports_error_and_exits_one(self, cli_env, capsys, argv, message):
        workspace, runner, _ = cli_env

        assert _run(argv) == 1

        err = capsys.readouterr().err
        assert err.startswith("Error: ")
        assert message in err
        assert runner.calls == []
        assert os.listdir(workspace) == []


@pytest.mark.unit
class TestScaffolding:

    def test_project_name_argument(self, cli_env, capsys):
        workspace, runner, _ = cli_env

        assert _run(["My App!", "--no-install"]) == 0

        target = workspace / "My App!"
        assert read_text(target / "README.md") == "# My App!\n"
        assert '"name": "my-app"' in read_text(target / "package.json")
        out = capsys.readouterr().out
        assert f"Created Bun project in {target}" in out
        assert "Skipped dependency install (--no-install)" in out
        assert "Next step: bun run src/index.ts" in out
        assert runner.commands("bun") == []

    @pytest.mark.parametrize("argv", [
        ["--path", "apps/web"], ["-p", "apps/web"], ["--path=apps/web"], ["-p=apps/web"],
    ])
    def test_path_option_forms(self, cli_env, argv):
        workspace, _, _ = cli_env

        assert _run(argv + ["--no-install"]) == 0

        assert read_text(workspace / "apps" / "web" / "README.md") == "# web\n"

    def test_installs_dependencies_by_default(self, cli_env, capsys):
        workspace, runner, _ = cli_env

        assert _run(["app"]) == 0

        assert runner.commands("bun") == [["bun", "install"]]
        assert "Installed dependencies with bun install" in capsys.readouterr().out

    def test_empty_cwd_is_scaffolded_in_place(self, cli_env):
        workspace, _, _ = cli_env

        assert _run(["--no-install"]) == 0

        assert read_text(workspace / "README.md") == "# workspace\n"

    def test_template_from_environment(self, cli_env, monkeypatch):
        _, runner, _ = cli_env
        monkeypatch.setenv("NEW_TEMPLATE_REPO", "https://example.com/custom.git")

        assert _run(["app", "--no-install"]) == 0

        assert runner.commands("git")[0][5] == "https://example.com/custom.git"

    def test_no_staging_directory_left_behind(self, cli_env):
        workspace, _, _ = cli_env

        _run(["app", "--no-install"])

        assert staging_dirs(workspace) == []


@pytest.mark.unit
class TestNonEmptyTarget:

    def test_without_force_and_terminal_fails(self, cli_env, capsys):
        workspace, runner, _ = cli_env
        write_files(str(workspace / "app"), {"README.md": "mine"})

        assert _run(["app"]) == 1

        err = capsys.readouterr().err
        assert f"Error: Target directory is not empty: {workspace / 'app'}. Use --force to overwrite." in err
        assert read_text(workspace / "app" / "README.md") == "mine"
        assert runner.calls == []

    def test_with_force_overwrites(self, cli_env):
        workspace, _, _ = cli_env
        write_files(str(workspace / "app"), {"README.md": "mine"})

        assert _run(["app", "-f", "--no-install"]) == 0

        assert read_text(workspace / "app" / "README.md") == "# app\n"

    def test_non_empty_cwd_without_terminal_fails(self, cli_env, capsys):
        workspace, _, _ = cli_env
        write_files(str(workspace), {"existing.txt": "x"})

        assert _run([]) == 1

        assert "Current directory is not empty" in capsys.readouterr().err


@pytest.mark.unit
class TestInteractive:

    def test_confirmed_overwrite(self, cli_env):
        workspace, _, prompter = cli_env
        prompter.interactive = True
        write_files(str(workspace / "app"), {"README.md": "mine"})

        assert _run(["app", "--no-install"]) == 0

        assert prompter.calls == [("confirm_overwrite", str(workspace / "app"))]
        assert read_text(workspace / "app" / "README.md") == "# app\n"

    def test_cancelled_prompt_exits_zero(self, cli_env, monkeypatch, capsys):
        workspace, runner, _ = cli_env
        monkeypatch.setattr("newcli.cli.Prompter", lambda: FakePrompter(project_name=None))
        write_files(str(workspace), {"existing.txt": "x"})

        assert _run([]) == 0

        assert "Operation cancelled." in capsys.readouterr().out
        assert runner.calls == []


@pytest.mark.unit
class TestSubprocessFailures:

    def test_clone_failure(self, cli_env, capsys):
        workspace, runner, _ = cli_env
        runner.set_result("git", ProcessResult(returncode=128, stderr="fatal: unable to access"))

        assert _run(["app"]) == 1

        err = capsys.readouterr().err
        assert "Error: git clone failed with exit code 128. fatal: unable to access" in err
        assert staging_dirs(workspace) == []

    def test_install_failure(self, cli_env, capsys):
        workspace, runner, _ = cli_env
        runner.set_result("bun", ProcessResult(returncode=1, stderr="error: 404"))

        assert _run(["app"]) == 1

        assert "Error: bun install failed with exit code 1. error: 404" in capsys.readouterr().err

    def test_missing_executable_reported_as_error(self, cli_env, capsys):
        _, runner, _ = cli_env

        def missing_git(cmd):
            raise FileNotFoundError(2, "No such file or directory", "git")

        runner.on("git", missing_git)

        assert _run(["app"]) == 1

        assert "No such file or directory" in capsys.readouterr().err
