"""Common components shared across the XML dispatcher.

FastAPI integration lives in ``xml_dispatcher.common.fastapi`` and is imported
explicitly so the core does not require it.
"""
