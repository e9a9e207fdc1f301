from ..common.handler import RootElementHandler
from ..logging_config import logger
from .models import CodeChanges


class CodeChangesHandler(RootElementHandler):
    """Handles XML with a ``<code_changes>`` root element.

    Keeps the branch name of the last processed document, which lets callers
    inspect what was dispatched without going through the returned record.
    """

    root_tag = "code_changes"
    record_model = CodeChanges
    record_shape = {"branch_name": "code_changes.branch_name"}

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.parsed_branch_name = ""

    def process(self, record: CodeChanges) -> None:
        self.parsed_branch_name = record.branch_name
        logger.info(f"Processing code changes on branch: {record.branch_name}")
