"""
Tip notification record.
"""

from pydantic import BaseModel


class TipRecord(BaseModel):
    username: str = "Unknown"
    amount: str = "0.00"  # always two fraction digits
    currency: str = "USD"
    message: str = ""
    status: str = "unknown"
    provider: str = "unknown"
