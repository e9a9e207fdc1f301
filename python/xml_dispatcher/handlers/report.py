from ..common.handler import RootElementHandler
from ..logging_config import logger
from .models import Report


class ReportHandler(RootElementHandler):
    """Handles XML with a ``<report>`` root element."""

    root_tag = "report"
    record_model = Report
    record_shape = {"data": "report.data"}

    def process(self, record: Report) -> None:
        logger.info(f"Processing report: {record.data}")
