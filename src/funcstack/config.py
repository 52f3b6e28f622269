"""Discovery configuration.

StackConfig is a frozen dataclass passed to ``load_stack()``; the CLI builds
one from its flags.
"""

from dataclasses import dataclass

SPEC_VERSION = "v1alpha1"


@dataclass(frozen=True, slots=True)
class StackConfig:
    """Configuration for one discovery run. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = StackConfig(entry_file="functions.py")
        stack = await load_stack("functions/", config)
    """

    # Manifest
    spec_version: str = SPEC_VERSION
    include_params: bool = True  # Emit declared params alongside endpoints

    # Source layout
    entry_file: str = "main.py"  # Looked up when the source dir is not a package

    # Trigger defaults
    platform: str = "gcfv2"
