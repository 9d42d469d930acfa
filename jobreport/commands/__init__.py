"""Click subcommands of the ``jobreport`` CLI."""
