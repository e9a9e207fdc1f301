"""Example handlers for fixed XML shapes."""

from typing import List, Optional

from ..common.handler import XMLHandler
from ..config import DispatcherConfig
from .code_changes import CodeChangesHandler
from .invoice import InvoiceHandler
from .models import CodeChanges, Invoice, Report
from .report import ReportHandler


def default_handlers(config: Optional[DispatcherConfig] = None) -> List[XMLHandler]:
    """Fresh instances of the example handlers, in registration order."""
    return [
        ReportHandler(config),
        InvoiceHandler(config),
        CodeChangesHandler(config),
    ]


__all__ = [
    "CodeChanges",
    "CodeChangesHandler",
    "Invoice",
    "InvoiceHandler",
    "Report",
    "ReportHandler",
    "default_handlers",
]
