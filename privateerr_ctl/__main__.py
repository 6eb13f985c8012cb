"""Allow running privateerr-ctl with ``python -m privateerr_ctl``."""

from .cli.main import cli

if __name__ == '__main__':
    cli(prog_name='privateerr-ctl')
