import click
import yaml
from .command.watch import WatchCommand


def create_watch_command() -> click.Command:
    """Create the watch command."""

    @click.command(name='watch')
    @click.option('--heartbeat', type=click.FloatRange(min=0, min_open=True), default=5.0,
                  help='Seconds between heartbeat log lines while the service runs')
    @click.option('--drain-time', type=click.FloatRange(min=0), default=0.0,
                  help='Seconds the service spends draining after cancellation')
    @click.pass_context
    def watch(ctx, heartbeat: float, drain_time: float):
        """Run a service until SIGINT or SIGTERM, then drain and exit.
        
        If draining outlasts --term-delay, or a second signal arrives,
        the process is terminated with exit status 1.
        """
        command = WatchCommand(config=ctx.obj.config)
        command.run(heartbeat, drain_time)

    return watch


def create_config_command() -> click.Command:
    """Create the config command."""

    @click.command(name='config')
    @click.pass_context
    def config(ctx):
        """Print the effective shutdown configuration as YAML."""
        effective = ctx.obj.config
        click.echo(yaml.safe_dump({
            'log_level': effective.log_level,
            'log_format': effective.log_format,
            'grace_period': effective.grace_period.total_seconds(),
        }, sort_keys=False), nl=False)

    return config
