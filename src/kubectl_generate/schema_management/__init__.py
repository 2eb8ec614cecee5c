"""Schema management exports."""

from .example_extraction import (
    ExtractionError,
    extract_example,
    find_type_definition,
    render_example,
    schema_name_for,
)
from .schema_merge import (
    LOCAL_EXAMPLE_PREFIX,
    OVERLAY_KEY_STRIP,
    build_example_overlay,
    merge_examples,
    overlay_key_for,
)
from .schema_models import Definition, SchemaDocument

__all__ = [
    "Definition",
    "SchemaDocument",
    "ExtractionError",
    "LOCAL_EXAMPLE_PREFIX",
    "OVERLAY_KEY_STRIP",
    "build_example_overlay",
    "merge_examples",
    "overlay_key_for",
    "extract_example",
    "find_type_definition",
    "render_example",
    "schema_name_for",
]
