"""HTTP tree client module."""

from .aggregator import ResponseAggregator, UploadObject
from .client import HttpClient
from .exceptions import HttpTreeError, MalformedResponseBody, TransportFailure, UnexpectedShape
from .inspector import has_child, is_known_error_shape, tree_values
from .models import FORM_URLENCODED, TRANSPORT_FAILURE, Request, Response
from .parser import parse_tree
from .transport import Transport
from .tree import Tree
from .types import BodySink, HeaderSink, ReadSink

__all__ = [
    "HttpClient",
    "Request",
    "Response",
    "Tree",
    "Transport",
    "ResponseAggregator",
    "UploadObject",
    "parse_tree",
    "has_child",
    "is_known_error_shape",
    "tree_values",
    "HttpTreeError",
    "TransportFailure",
    "MalformedResponseBody",
    "UnexpectedShape",
    "BodySink",
    "HeaderSink",
    "ReadSink",
    "FORM_URLENCODED",
    "TRANSPORT_FAILURE",
]
