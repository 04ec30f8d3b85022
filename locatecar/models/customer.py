from dataclasses import dataclass
from enum import Enum


class CustomerKind(Enum):
    INDIVIDUAL = "individual"
    ORGANIZATION = "organization"

    @property
    def display(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value) -> "CustomerKind":
        """Accept a member or its value in any case; raise ValueError otherwise."""
        if isinstance(value, cls):
            return value
        return cls(str(value or "").strip().lower())


@dataclass
class Customer:
    """
    Customer record tagged by `kind`. The variant decides which document form
    is expected (11 digits for individuals, 14 for organizations); the document
    itself is the unique key across all customers.
    """
    kind: CustomerKind
    name: str
    email: str
    phone: str
    document: str

    @classmethod
    def individual(cls, name: str, email: str, phone: str, document: str) -> "Customer":
        return cls(CustomerKind.INDIVIDUAL, name, email, phone, document)

    @classmethod
    def organization(cls, name: str, email: str, phone: str, document: str) -> "Customer":
        return cls(CustomerKind.ORGANIZATION, name, email, phone, document)

    @property
    def display_category(self) -> str:
        return self.kind.display

    @property
    def label(self) -> str:
        return f"{self.name} ({self.document})"

    @property
    def email_domain(self) -> str:
        """Part after '@', or '' when the email has none."""
        _, sep, domain = (self.email or "").partition("@")
        return domain if sep else ""

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "category": self.display_category,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "document": self.document,
        }
