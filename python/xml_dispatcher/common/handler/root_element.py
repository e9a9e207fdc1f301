"""Base handler that recognizes payloads by their root element.

Subclasses declare a recognition key and a record shape:

```python
class ReportHandler(RootElementHandler):
    root_tag = "report"
    record_model = Report
    record_shape = {"data": "report.data"}

    def process(self, record: Report) -> None:
        logger.info(f"Processing report: {record.data}")
```
"""

from typing import Any, ClassVar, Dict, Mapping, Optional, Type

from lxml import etree
from pydantic import BaseModel

from ...config import DispatcherConfig
from ...logging_config import logger
from ..xml import compile_shape, document_to_dict, extract, local_name, parse_payload
from .base import XMLHandler


class RootElementHandler(XMLHandler):
    """Handler matching a fixed root local name and optional root attributes.

    Attributes:
        root_tag: Expected local name of the root element (case-sensitive,
                  namespace ignored)
        root_attributes: Root attributes that must be present with these exact values
        record_model: Pydantic model the payload is decoded into
        record_shape: Record field name -> JMESPath expression over the decoded document
    """

    root_tag: ClassVar[str]
    root_attributes: ClassVar[Mapping[str, str]] = {}
    record_model: ClassVar[Type[BaseModel]]
    record_shape: ClassVar[Dict[str, Any]] = {}

    def __init__(self, config: Optional[DispatcherConfig] = None) -> None:
        self.config = config
        self._compiled_shape = compile_shape(self.record_shape)

    def can_handle(self, payload: bytes) -> bool:
        try:
            root = parse_payload(payload, self.config)
        except (etree.XMLSyntaxError, ValueError) as e:
            logger.debug(f"{self.__class__.__name__} cannot decode payload: {e}")
            return False

        if local_name(root) != self.root_tag:
            return False

        for name, expected in self.root_attributes.items():
            if root.get(name) != expected:
                logger.debug(
                    f"{self.__class__.__name__} rejected <{self.root_tag}>: "
                    f"{name}={root.get(name)!r}, expected {expected!r}"
                )
                return False
        return True

    def decode(self, payload: bytes) -> BaseModel:
        """Decode the payload into a fresh ``record_model`` instance.

        Absent and empty child elements are indistinguishable here: both leave
        the field at the model's default.

        Raises:
            lxml.etree.XMLSyntaxError: If the payload is not well-formed XML
            pydantic.ValidationError: If extracted values do not fit the model
        """
        root = parse_payload(payload, self.config)
        fields = extract(document_to_dict(root), self._compiled_shape)
        return self.record_model.model_validate(fields)

    def handle(self, payload: bytes) -> BaseModel:
        record = self.decode(payload)
        self.process(record)
        return record

    def process(self, record: BaseModel) -> None:
        """Act on a decoded record. The default does nothing."""
        pass
