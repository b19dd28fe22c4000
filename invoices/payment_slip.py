# invoices/payment_slip.py
"""
Swiss payment slip (ESR) numbers.

All check digits use the ESR "modulo 10, recursive" algorithm: a
carry is looked up in a fixed table for every digit, and the check
digit is the complement of the final carry to 10.
"""

from decimal import Decimal

from .exceptions import PaymentSlipError

#: Carry table of the modulo 10 recursive algorithm
CHECK_DIGIT_TABLE = (0, 9, 4, 6, 8, 2, 7, 1, 3, 5)

#: Length of a reference number without its check digit
REFERENCE_LENGTH = 26

#: Document type codes on the code line
BC_WITH_AMOUNT = "01"
BC_WITHOUT_AMOUNT = "04"


def _digits(value: str, what: str) -> str:
    if not value or not (value.isascii() and value.isdigit()):
        raise PaymentSlipError(f"{what} must consist of digits: {value!r}")
    return value


class PaymentSlip:
    """
    Numbers printed on an orange payment slip.

    Parameters
    ----------
    participant_number : str, optional
        ESR participant number formatted ``XX-YYYYYY-Z``; needed for
        the code line only.
    """

    def __init__(self, participant_number: str | None = None):
        self.participant_number = participant_number

    @staticmethod
    def check_digit(digits: str) -> int:
        """
        Compute the check digit of a string of digits.

        Parameters
        ----------
        digits : str
            The digits to protect; may be empty.

        Returns
        -------
        int
            The check digit, 0 to 9.
        """
        carry = 0
        for char in digits:
            carry = CHECK_DIGIT_TABLE[(carry + int(char)) % 10]
        return (10 - carry) % 10

    def esr_number(self, reference: str) -> str:
        """
        Return the formatted 27 digit reference number.

        The reference is left-padded with zeros to 26 digits, the check
        digit appended and the result grouped in fives from the right.

        Raises
        ------
        PaymentSlipError
            If ``reference`` is not numeric or longer than 26 digits.
        """
        number = self._reference_with_check_digit(reference)
        head, tail = number[:2], number[2:]
        groups = [tail[i:i + 5] for i in range(0, len(tail), 5)]
        return " ".join([head, *groups])

    def code_line(self, reference: str, amount: Decimal | None = None) -> str:
        """
        Return the OCR code line of the slip.

        Parameters
        ----------
        reference : str
            The reference number without check digit.
        amount : Decimal, optional
            The amount in CHF; slips without amount use the
            ``04`` document type.

        Raises
        ------
        PaymentSlipError
            If a number is malformed or the participant number is missing.
        """
        if amount is None:
            head = BC_WITHOUT_AMOUNT
        else:
            cents = int((Decimal(amount) * 100).quantize(Decimal("1")))
            head = f"{BC_WITH_AMOUNT}{cents:010d}"
        head += str(self.check_digit(head))
        number = self._reference_with_check_digit(reference)
        return f"{head}>{number}+ {self.padded_participant_number()}>"

    def padded_participant_number(self) -> str:
        """
        Return the participant number as 9 digits (``XX-YYYYYY-Z``).
        """
        if not self.participant_number:
            raise PaymentSlipError("participant number is missing")
        parts = self.participant_number.split("-")
        if len(parts) != 3:
            raise PaymentSlipError(
                f"participant number must be formatted XX-YYYYYY-Z: {self.participant_number!r}"
            )
        prefix, middle, check = (_digits(p, "participant number") for p in parts)
        return f"{prefix}{middle.zfill(6)}{check}"

    def _reference_with_check_digit(self, reference: str) -> str:
        reference = _digits(reference.replace(" ", ""), "reference")
        if len(reference) > REFERENCE_LENGTH:
            raise PaymentSlipError(f"reference longer than {REFERENCE_LENGTH} digits")
        padded = reference.zfill(REFERENCE_LENGTH)
        return f"{padded}{self.check_digit(padded)}"
