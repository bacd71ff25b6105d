"""Platform services (logging) shared by the library and the CLI."""
