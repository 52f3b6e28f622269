"""Deploy-time params.

Declare configuration that the deploy tool resolves, then use the params
either directly at runtime (``param.value``) or as deferred expressions in
trigger options (``param.expr()``, ``param.equals(x).then(a, b)``).
"""

from funcstack.params.builtin import (
    DATABASE_URL,
    GCLOUD_PROJECT,
    PROJECT_ID,
    STORAGE_BUCKET,
)
from funcstack.params.define import (
    get_boolean,
    get_float,
    get_int,
    get_json,
    get_json_secret,
    get_list,
    get_secret,
    get_string,
)
from funcstack.params.inputs import (
    BUCKET_PICKER,
    MultiSelectInput,
    ResourceInput,
    SelectInput,
    SelectOption,
    TextInput,
    multi_select,
    select,
)
from funcstack.params.registry import (
    ParamRegistry,
    clear_params,
    current_registry,
    use_registry,
)
from funcstack.params.types import (
    BooleanParam,
    BuiltinParam,
    FloatParam,
    IntParam,
    JSONParam,
    JSONSecretParam,
    ListParam,
    Param,
    SecretParam,
    StringParam,
)

__all__ = [
    "BUCKET_PICKER",
    "DATABASE_URL",
    "GCLOUD_PROJECT",
    "PROJECT_ID",
    "STORAGE_BUCKET",
    "BooleanParam",
    "BuiltinParam",
    "FloatParam",
    "IntParam",
    "JSONParam",
    "JSONSecretParam",
    "ListParam",
    "MultiSelectInput",
    "Param",
    "ParamRegistry",
    "ResourceInput",
    "SecretParam",
    "SelectInput",
    "SelectOption",
    "StringParam",
    "TextInput",
    "clear_params",
    "current_registry",
    "get_boolean",
    "get_float",
    "get_int",
    "get_json",
    "get_json_secret",
    "get_list",
    "get_secret",
    "get_string",
    "multi_select",
    "select",
    "use_registry",
]
