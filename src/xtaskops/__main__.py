from xtaskops.cli import cli

cli()
