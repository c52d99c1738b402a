"""Common ports."""

from apps.social.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]
