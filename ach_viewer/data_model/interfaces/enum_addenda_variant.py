from enum import Enum


class AddendaVariant(Enum):
    """
    Layout variants of an addenda (``7``) record, keyed by addenda type code.
    """
    CHANGE = "change"  # 98: notification of change
    RETURN = "return"  # 99: return
    GENERAL = "general"  # anything else: remittance information

    @classmethod
    def from_type_code(cls, code: str) -> "AddendaVariant":
        """
        Map the two-character addenda type code to its layout variant.
        Unknown codes fall back to GENERAL.
        """
        if code == "98":
            return cls.CHANGE
        if code == "99":
            return cls.RETURN
        return cls.GENERAL
