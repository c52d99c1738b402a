"""HTTP utilities."""

from apps.social.presentation.http.utils.identifiers import InvalidIdentifierError, parse_uuid

__all__ = ["InvalidIdentifierError", "parse_uuid"]
