"""
Custom handlers using decorator registration.

This example demonstrates:
- Declaring handlers with RootElementHandler and a JMESPath record shape
- Registering them with @register_handler (registration order = match priority)
- Serving the global registry over HTTP with create_xml_router

Usage:
------
    uvicorn custom_handlers:app
    curl -X POST --data '<order status="paid"><id>17</id></order>' localhost:8000/xml
"""

import logging

from fastapi import FastAPI
from pydantic import BaseModel

from xml_dispatcher import (
    RootElementHandler,
    XMLProcessor,
    handler_registry,
    register_handler,
)
from xml_dispatcher.common.fastapi import create_xml_router
from xml_dispatcher.handlers import ReportHandler

logger = logging.getLogger(__name__)


class Order(BaseModel):
    id: int
    status: str = ""


@register_handler
class PaidOrderHandler(RootElementHandler):
    """Handles <order status="paid"> documents before any other order handler."""

    root_tag = "order"
    root_attributes = {"status": "paid"}
    record_model = Order
    record_shape = {"id": "order.id", "status": 'order."@status"'}

    def process(self, record: Order) -> None:
        logger.info(f"Shipping paid order {record.id}")


@register_handler
class OrderHandler(RootElementHandler):
    """Fallback for orders in any other status."""

    root_tag = "order"
    record_model = Order
    record_shape = {"id": "order.id", "status": 'order."@status"'}

    def process(self, record: Order) -> None:
        logger.info(f"Holding order {record.id} ({record.status or 'no status'})")


register_handler(ReportHandler)

app = FastAPI()
app.include_router(create_xml_router(XMLProcessor(registry=handler_registry)))
