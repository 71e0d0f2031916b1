import click
from click.core import ParameterSource
from datetime import timedelta
from typing import Optional, TextIO
from src.modules.logging import LOG_FORMATS, LOG_LEVELS
from src.modules.service import create_config_command, create_watch_command
from src.modules.shutdown import ShutdownConfig
from src.modules.shutdown.validator import ShutdownConfigValidator


class GracetermContext:
    """Context object to store CLI state."""
    def __init__(self):
        self.config = ShutdownConfig()

pass_context = click.make_pass_decorator(GracetermContext, ensure=True)

@click.group()
@click.option('--config', '-c', 'config_file',
              type=click.File('r'),
              help='YAML file with log_level, log_format and grace_period; command line options take precedence',
              envvar='GRACETERM_CONFIG')
@click.option('--log-format', '-o',
              type=click.Choice(LOG_FORMATS),
              default='colorful',
              help='Output format (colorful for CLI, plain for CI/file, json for machine parsing)',
              envvar='GRACETERM_LOG_FORMAT')
@click.option('--log-level', '-l',
              type=click.Choice(LOG_LEVELS),
              default='INFO',
              help='Set the logging level',
              envvar='GRACETERM_LOG_LEVEL')
@click.option('--term-delay', '-t',
              type=click.FloatRange(min=0),
              default=0.0,
              help='Seconds to wait after SIGTERM or SIGINT before exiting; 0 waits for a second signal',
              envvar='GRACETERM_TERM_DELAY')
@pass_context
def cli(ctx, config_file: Optional[TextIO], log_format, log_level, term_delay):
    """graceterm: graceful shutdown for long-running services."""
    config = ShutdownConfig()
    if config_file is not None:
        try:
            config = ShutdownConfigValidator.validate_and_load(config_file.read())
        except ValueError as e:
            raise click.ClickException(str(e))

    click_ctx = click.get_current_context()
    overrides = {}
    for param, field, value in (
        ('log_format', 'log_format', log_format),
        ('log_level', 'log_level', log_level),
        ('term_delay', 'grace_period', timedelta(seconds=term_delay)),
    ):
        if click_ctx.get_parameter_source(param) != ParameterSource.DEFAULT:
            overrides[field] = value

    ctx.config = config.model_copy(update=overrides)

# Add commands
cli.add_command(create_watch_command())
cli.add_command(create_config_command())

def main():
    cli()

if __name__ == '__main__':
    main()
