"""Click entry point for the ``new`` command."""

import click

from newcli.options import CliOptions, resolve_config
from newcli.prompts import Prompter
from newcli.scaffold.config import DEFAULT_TEMPLATE_REPO
from newcli.scaffold.errors import ScaffoldError
from newcli.scaffold.process_runner import ProcessRunner
from newcli.scaffold.scaffolder import scaffold_project

DIST_NAME = "new-cli"
NEXT_STEP = "bun run src/index.ts"


def run_new(opts: CliOptions, prompter, runner):
    """Resolve options, scaffold the project and report the result."""
    config = resolve_config(opts, prompter)

    click.echo("Scaffolding Bun project...")
    result = scaffold_project(config, runner=runner)

    click.echo(f"Created Bun project in {result.target_directory}")
    if result.installed_dependencies:
        click.echo("Installed dependencies with bun install")
    else:
        click.echo("Skipped dependency install (--no-install)")
    click.echo(f"Next step: {NEXT_STEP}")
    return result


@click.command("new", context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("project_names", nargs=-1, metavar="[PROJECT_NAME]")
@click.option("-p", "--path", "paths", multiple=True, metavar="PATH",
              help="Target directory path")
@click.option("-f", "--force", is_flag=True,
              help="Overwrite non-empty target directory")
@click.option("--no-install", is_flag=True,
              help="Skip bun install after scaffold")
@click.option("--template", "template_source", envvar="NEW_TEMPLATE_REPO",
              default=DEFAULT_TEMPLATE_REPO, show_envvar=True, hidden=True,
              help="Template repository to clone")
@click.version_option(None, "-v", "--version", package_name=DIST_NAME,
                      message="%(version)s")
def new_cmd(project_names, paths, force, no_install, template_source):
    """Scaffold a new Bun project from the template repository.

    Pass either a PROJECT_NAME (created under the current directory) or
    --path, not both.
    """
    opts = CliOptions(
        project_names=project_names,
        paths=paths,
        force=force,
        install=not no_install,
        template_source=template_source,
    )
    opts.validate()
    run_new(opts, Prompter(), ProcessRunner())


def main(argv=None):
    """Console-script entry: run new_cmd and turn failures into ``Error:`` + exit 1."""
    try:
        new_cmd.main(args=argv, prog_name="new", standalone_mode=False)
    except click.Abort:
        click.echo("Operation cancelled.")
        return 0
    except click.ClickException as e:
        click.echo(f"Error: {e.format_message()}", err=True)
        raise SystemExit(1)
    except (ScaffoldError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    return 0
