from .company_record import CompanyRecord, FounderRecord
from .input_row import InputRow

__all__ = [
    "CompanyRecord",
    "FounderRecord",
    "InputRow",
]
