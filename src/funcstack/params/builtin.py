"""Built-in params the platform resolves without prompting the deployer.

Use them like any string param, in expressions or at runtime::

    from funcstack.params.builtin import PROJECT_ID

    @on_request(min_instances=PROJECT_ID.equals("shop-prod").then(1, 0))
    def hello(request):
        return PROJECT_ID.value
"""

from funcstack.params.types import BuiltinParam

# Default realtime database URL, "" when the project has none
DATABASE_URL = BuiltinParam("DATABASE_URL", "databaseURL")
PROJECT_ID = BuiltinParam("PROJECT_ID", "projectId")
GCLOUD_PROJECT = BuiltinParam("GCLOUD_PROJECT", "projectId")
# Default storage bucket, "" when undefined
STORAGE_BUCKET = BuiltinParam("STORAGE_BUCKET", "storageBucket")
