"""
kglight CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging

import click

from .commands import graph, initialize, options, stats


@click.group()
@click.version_option(package_name="kglight")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """kglight: Integration Inventory Graph.

    Renders producer/consumer integrations from a CSV inventory as an
    interactive force-directed graph.

    \b
    Quick Start:
      kglight init --demo
      kglight options inventory.csv
      kglight graph inventory.csv -l Active -o graph.html
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="[%X]",
    )


# Register commands
main.add_command(graph.graph)
main.add_command(options.options)
main.add_command(stats.stats)
main.add_command(initialize.init)

if __name__ == "__main__":
    main()
