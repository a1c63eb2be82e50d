"""Reference kind enum."""

from enum import Enum


class ReferenceKind(str, Enum):
    ISSUE = "issue"
    MERGE_REQUEST = "merge_request"
    PROJECT = "project"
