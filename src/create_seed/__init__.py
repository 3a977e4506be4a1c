"""create-seed: scaffold JavaScript projects from templates and maintain template registries."""

__version__ = "0.1.0"
