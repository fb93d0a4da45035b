# cli - command line entry point and terminal UI
