"""Domain packages for the Homebrew updater."""
