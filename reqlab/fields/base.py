# reqlab/fields/base.py
from typing import Any, Protocol
from reqlab.models import FieldType

class Classifier(Protocol):
    def classify(self, value: Any) -> FieldType:
        """Return a semantic type for a single leaf value. Must never raise."""
        ...
