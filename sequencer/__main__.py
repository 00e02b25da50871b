"""Entry point for running the CLI: python -m sequencer"""

from sequencer.cli import cli

if __name__ == "__main__":
    cli()
