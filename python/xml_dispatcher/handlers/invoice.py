from ..common.handler import RootElementHandler
from ..logging_config import logger
from .models import Invoice


class InvoiceHandler(RootElementHandler):
    """Handles XML with an ``<invoice type="sales">`` root element."""

    root_tag = "invoice"
    root_attributes = {"type": "sales"}
    record_model = Invoice
    record_shape = {"amount": "invoice.amount"}

    def process(self, record: Invoice) -> None:
        logger.info(f"Processing invoice amount: {record.amount}")
