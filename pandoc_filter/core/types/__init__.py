# pandoc_filter/core/types/__init__.py

"""Type definitions shared by the codec layers"""

# Local imports
from pandoc_filter.core.types.json import JSONDict
from pandoc_filter.core.types.json import JSONList
from pandoc_filter.core.types.json import JSONPath
from pandoc_filter.core.types.json import JSONPrimitive
from pandoc_filter.core.types.json import JSONType

__all__ = ["JSONDict", "JSONList", "JSONPath", "JSONPrimitive", "JSONType"]
