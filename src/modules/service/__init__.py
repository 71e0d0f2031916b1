"""Example long-running service wired to the shutdown coordinator."""

from .commands import create_config_command, create_watch_command

__all__ = ['create_config_command', 'create_watch_command']
