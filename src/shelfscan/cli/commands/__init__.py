# ABOUTME: Subcommand modules for the shelfscan CLI.
