import logging
import sys
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple, get_args

import pydantic
import yaml
from click.core import ParameterSource
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from keygroup import KeyGroupException
from keygroup import __version__
from keygroup._typing import ContainerName, OutputFormat
from keygroup.core import run_group
from keygroup.keys import KEY_GENERATORS
from keygroup.output import OUTPUT_FORMATS

# mypy has issues with the dynamic nature of rich-click
if TYPE_CHECKING:  # pragma: no cover
    import click
else:
    import rich_click as click

    click.rich_click.MAX_WIDTH = 100
    click.rich_click.STYLE_ERRORS_SUGGESTION = "bold"
    click.rich_click.STYLE_REQUIRED_LONG = "bold red"
    click.rich_click.USE_MARKDOWN = True

_OUTPUTS = list(OUTPUT_FORMATS)
_CONTAINERS = list(get_args(ContainerName))


class AppState(BaseSettings):
    """Persistent application state."""

    model_config = SettingsConfigDict(env_prefix="KEYGROUP_")

    key: str = "length"
    container: ContainerName = "set"
    output: OutputFormat = "table"
    strip: bool = True
    skip_blank: bool = False
    quiet: bool = False
    debug: bool = False


pass_state = click.make_pass_decorator(AppState, ensure=True)


class Configuration(BaseModel):
    """The current state of configuration file settings."""

    model_config = ConfigDict(extra="forbid")

    key: str = "length"
    container: ContainerName = "set"
    output: OutputFormat = "table"
    strip: bool = True
    skip_blank: bool = False
    quiet: bool = False


def configuration_option(function: Callable):
    """Decorator for the `config` option. Not exposed to the underlying command."""

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if value:
            with open(value, "rt") as file:
                contents = yaml.safe_load(file) or {}

            try:
                configuration = Configuration.model_validate(contents)
            except pydantic.ValidationError as exception:
                raise click.BadParameter(
                    f"Invalid configuration file {value!r}: {_describe(exception)}"
                )

            for name in configuration.model_fields_set:
                setattr(state, name, getattr(configuration, name))
        return value

    return click.option(
        "--config",
        default=None,
        type=click.Path(exists=True, file_okay=True, dir_okay=False),
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=True,  # Must be True
        help="Path to the yaml configuration file.",
    )(function)


def _is_explicit(
    context: click.Context, parameter: click.Parameter, value: Any
) -> bool:
    """Whether an option value was given rather than defaulted."""
    if value is None or parameter.name is None:
        return False
    source = context.get_parameter_source(parameter.name)
    return source is not ParameterSource.DEFAULT


def _state_option(name: str, *param_decls: str, **attrs: Any):
    """Creates a decorator for an option stored in the application state."""

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if _is_explicit(context, parameter, value):
            setattr(state, name, value)
        return getattr(state, name)

    def decorator(function: Callable):
        return click.option(
            *param_decls,
            name,
            default=None,  # Must be None
            callback=callback,
            expose_value=False,  # Must be False
            is_eager=False,  # Must be False
            **attrs,
        )(function)

    return decorator


key_option = _state_option(
    "key",
    "-k",
    "--key",
    type=click.STRING,
    metavar="KEY",
    help=(
        "Rule used to derive the group key of each line. "
        f"Allowed values: {{{', '.join(sorted(KEY_GENERATORS))}}}. [length]"
    ),
)

container_option = _state_option(
    "container",
    "-c",
    "--container",
    type=click.Choice(_CONTAINERS),
    metavar="CONTAINER",
    help=(
        "Container holding the members of each group. Sets remove duplicate "
        f"lines, lists keep them. Allowed values: {{{', '.join(_CONTAINERS)}}}. [set]"
    ),
)

output_option = _state_option(
    "output",
    "-o",
    "--output",
    type=click.Choice(_OUTPUTS),
    metavar="OUTPUT",
    help=(
        "Specifies the format of the grouping results. "
        f"Allowed values: {{{', '.join(_OUTPUTS)}}}. [table]"
    ),
)

strip_option = _state_option(
    "strip",
    "--strip/--no-strip",
    help="Strip leading and trailing whitespace from each line. [strip]",
)

skip_blank_option = _state_option(
    "skip_blank",
    "--skip-blank",
    is_flag=True,
    help="Ignore lines that are empty or contain only whitespace.",
)


def quiet_option(function: Callable):
    """Decorator for the `quiet` option. Not exposed to the underlying command."""

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if _is_explicit(context, parameter, value):
            state.quiet = value
        return state.quiet

    return click.option(
        "--quiet",
        is_flag=True,
        default=None,  # Must be None
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=False,  # Must be False
        help="Quiet mode. Suppresses all animations and status related output.",
    )(function)


def debug_option(function: Callable):
    """
    Decorator for the `debug` command line option. Not exposed underlying command.

    The `debug` option prints debugging information to stderr and forces quiet
    mode.
    """

    def callback(context: click.Context, parameter: click.Parameter, value: Any):
        state = context.ensure_object(AppState)
        if _is_explicit(context, parameter, value):
            state.debug = value
        if state.debug:
            logging.basicConfig(
                format="%(filename)s: %(message)s",
                stream=sys.stderr,
                level=logging.DEBUG,
            )
        return state.debug

    return click.option(
        "-d",
        "--debug",
        is_flag=True,
        default=None,  # Must be None
        callback=callback,
        expose_value=False,  # Must be False
        is_eager=False,  # Must be False
        help="Enable debugging output. Automatically enters quiet mode.",
    )(function)


# Root command
@click.group()
@click.version_option(prog_name="keygroup", version=__version__)
@click.pass_context
def app(context: click.Context):
    """Partition lines of text into groups that share a common key."""
    try:
        context.obj = AppState()
    except pydantic.ValidationError as exception:
        raise click.UsageError(
            f"Invalid KEYGROUP_* environment variable: {_describe(exception)}"
        )


# Sub-command: group
@app.command(short_help="Group the lines of text files by a key.")
@click.argument("files", nargs=-1, type=click.File("rt"))
@key_option
@container_option
@output_option
@strip_option
@skip_blank_option
@configuration_option
@quiet_option
@debug_option
@pass_state
def group(state: AppState, files: Tuple[Any, ...]):
    """
    Group the lines of FILES by a key derived from each line and report the
    resulting groups.

    - Lines are read from standard input when no FILES (or `-`) are given

    - Every line ends up in exactly one group; lines in the same group share
    the same key

    - Options specified on the command line *override* those specified in a
    configuration file
    """
    sources = files if files else (click.get_text_stream("stdin"),)
    quiet = state.quiet or state.debug or state.output == "json"

    try:
        run_group(
            sources,
            key=state.key,
            container=state.container,
            output=state.output,
            strip=state.strip,
            skip_blank=state.skip_blank,
            quiet=quiet,
        )
    except KeyGroupException as exception:
        _process_application_exception(exception)


# Sub-command: keys
@app.command(short_help="List the available key rules.")
def keys():
    """List the key rules that can be passed to `group --key`."""
    width = max(len(name) for name in KEY_GENERATORS)
    for name in sorted(KEY_GENERATORS):
        click.echo(f"{name:<{width}}  {_summary(KEY_GENERATORS[name])}")


def _summary(function: Callable) -> str:
    doc: Optional[str] = function.__doc__
    return doc.strip().splitlines()[0] if doc else ""


def _describe(exception: pydantic.ValidationError) -> str:
    """Summarizes validation errors as `field: message` pairs."""
    return "; ".join(
        f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
        for error in exception.errors()
    )


def _process_application_exception(exception: KeyGroupException) -> None:
    click.secho("\n\n ERROR: ", fg="red", bold=True, nl=False, err=True)
    click.secho(exception.args[0], err=True)
    sys.exit(1)
