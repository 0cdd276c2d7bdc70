from timealign.classification.info import ClassificationInfo, assemble, class_info
from timealign.domain.timeline import Timeline
from timealign.domain.window import FlatIndexRange, IndexPair, ReferenceWindow, Window

__all__ = [
    "ClassificationInfo",
    "FlatIndexRange",
    "IndexPair",
    "ReferenceWindow",
    "Timeline",
    "Window",
    "assemble",
    "class_info",
]
