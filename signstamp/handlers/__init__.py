# Reexport all handlers

from .sign import handle_sign_document
from .signature import handle_generate_signature

__all__ = [
    "handle_generate_signature",
    "handle_sign_document",
]
