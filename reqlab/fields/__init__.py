from .detectors import DETECTORS, RuleClassifier, classify
from .extract import classify_form, classify_query, extract_body_mappings, extract_fields
from .base import Classifier

__all__ = [
    "DETECTORS",
    "RuleClassifier",
    "classify",
    "classify_form",
    "classify_query",
    "extract_body_mappings",
    "extract_fields",
    "Classifier",
]
