"""
Test package for todo-cli.

- unit/: Unit tests for models, store, configuration and logging
- cli/: Command tests driven through typer's CliRunner
"""
