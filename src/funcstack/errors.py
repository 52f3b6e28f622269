"""Funcstack exception hierarchy.

Shared across the loader, the param layer, and the CLI so every module
raises and catches the same types.
"""


class FuncstackError(Exception):
    """Base for all funcstack-specific errors."""


class ManifestError(FuncstackError):
    """Raised when a manifest cannot be assembled from a function source.

    Assembly is all-or-nothing: once this is raised no partial manifest
    is returned to the caller.
    """


class InvalidExportNameError(ManifestError):
    """Raised when an exported function name contains a dash.

    Dashes join nested group names into endpoint keys, so a name that
    already contains one could not be mapped back to an entry point.
    """

    def __init__(self, name: str, prefix: str = "") -> None:
        self.name = name
        self.prefix = prefix
        location = f" (in group {prefix.rstrip('-')!r})" if prefix else ""
        msg = (
            f"Function name {name!r}{location} contains a dash. "
            "Dashes are reserved for joining group names; rename the export."
        )
        super().__init__(msg)


class ParamValueError(FuncstackError, ValueError):
    """Raised when a param's environment value cannot be parsed."""
