"""User-agent parsing driven by a regexes.yaml rule file, with snippet indexing."""

__version__ = "1.0.0"