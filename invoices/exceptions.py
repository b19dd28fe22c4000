# invoices/exceptions.py
"""
Custom exceptions for the invoices application.

Validation of invoice settings never raises: it collects field
errors. These exceptions signal programming or data errors when
payment slip numbers are computed.
"""


class InvoiceError(Exception):
    """
    Base class for invoice-related errors.
    """


class PaymentSlipError(InvoiceError):
    """
    Raised when a payment slip number cannot be computed.

    Typically a reference or participant number containing
    characters other than digits, or one that is too long.
    """
