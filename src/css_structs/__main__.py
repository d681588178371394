from css_structs.cli.main import cli

cli()
