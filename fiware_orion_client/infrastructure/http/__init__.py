"""
HTTP Package - Infrastructure Layer

Header merging and one helper per HTTP verb used against Orion.
"""

from .verbs import (
    delete_request,
    get_request,
    merge_headers,
    patch_request,
    post_request,
    put_request,
)

__all__ = [
    "merge_headers",
    "get_request",
    "post_request",
    "patch_request",
    "put_request",
    "delete_request",
]
