"""Records decoded by the example handlers."""

from pydantic import BaseModel


class Report(BaseModel):
    """Decoded ``<report>`` document."""

    data: str = ""


class Invoice(BaseModel):
    """Decoded ``<invoice type="sales">`` document."""

    amount: str = ""


class CodeChanges(BaseModel):
    """Decoded ``<code_changes>`` document."""

    branch_name: str = ""
