"""
semjson version constants.

The library version is reported by the CLI and kept in step with
pyproject.toml.
"""

# Library version (matches pyproject.toml)
SEMJSON_VERSION = "0.1.0"
