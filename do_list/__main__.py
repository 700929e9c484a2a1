"""Allow running Do List as ``python -m do_list``."""

from .cli.main import cli

if __name__ == '__main__':
    cli()
