from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from locatecar.exceptions import CustomerNotFoundError, ValidationError
from locatecar.logging_config import get_logger
from locatecar.models.customer import Customer, CustomerKind
from locatecar.models.repository import paginate
from locatecar.models.store import Store
from locatecar.services.common import _lc, clean_text
from locatecar.utils.constants import DEFAULT_PAGE_SIZE, TOP_EMAIL_DOMAINS
from locatecar.utils.validation import is_valid_email, is_valid_phone


class CustomerService:
    """Customer admin operations and searches."""

    def __init__(self, store: Store):
        self.store = store
        self._logger = get_logger(self.__class__.__name__)

    @property
    def repo(self):
        return self.store.customers

    def register(self, customer: Customer) -> Customer:
        """
        Register an individual or organization. The repository rejects an
        invalid document or email and a document that is already taken.
        """
        c = replace(
            customer,
            name=clean_text(customer.name),
            email=clean_text(customer.email),
            phone=clean_text(customer.phone),
            document=clean_text(customer.document),
        )
        if not c.name:
            raise ValidationError("Error: name is required")
        self.repo.register(c)
        if not is_valid_phone(c.phone):
            self._logger.warning("Customer %s registered with an incomplete phone: %r",
                                 c.document, c.phone)
        self._logger.info("%s customer %s registered", c.display_category, c.document)
        return c

    def find(self, document: str) -> Customer:
        """Return a customer by document or raise CustomerNotFoundError."""
        c = self.repo.find_by_id((document or "").strip())
        if c is None:
            raise CustomerNotFoundError(f"Error: customer with document '{document}' not found")
        return c

    def find_by_email(self, email: str) -> Optional[Customer]:
        return self.repo.find_by_email(email)

    def update(self, document: str, name: Optional[str] = None,
               email: Optional[str] = None, phone: Optional[str] = None) -> Customer:
        """Change name, email or phone; blank values are ignored."""
        current = self.find(document)
        name, email, phone = clean_text(name), clean_text(email), clean_text(phone)
        changes = {}
        if name:
            changes["name"] = name
        if email:
            if not is_valid_email(email):
                raise ValidationError(f"Error: invalid email: {email}")
            changes["email"] = email
        if phone:
            changes["phone"] = phone
        if not changes:
            return current
        updated = self.repo.modify(current.document, lambda c: replace(c, **changes))
        if updated is None:
            raise CustomerNotFoundError(f"Error: customer with document '{document}' not found")
        return updated

    # --------------- Queries ---------------
    def list_page(self, page: int = 1, size: int = DEFAULT_PAGE_SIZE) -> List[Customer]:
        return self.repo.paginate(page, size)

    def list_sorted(self, page: int = 1, size: int = DEFAULT_PAGE_SIZE) -> List[Customer]:
        """Ordered by name."""
        return self.repo.sorted_by_name(page, size)

    def search_by_name(self, text: str, page: int = 1,
                       size: int = DEFAULT_PAGE_SIZE) -> List[Customer]:
        return paginate(self.repo.search_by_name(text), page, size)

    def filter_customers(self, name=None, email=None, kind=None,
                         page: int = 1, size: int = DEFAULT_PAGE_SIZE) -> List[Customer]:
        """
        AND-combination of the criteria that are given:
        - name / email: case-insensitive partial match
        - kind: exact variant (member or 'individual' / 'organization')
        """
        checks = []
        name_kw = _lc(name).strip()
        if name_kw:
            checks.append(lambda c: name_kw in _lc(c.name))
        email_kw = _lc(email).strip()
        if email_kw:
            checks.append(lambda c: email_kw in _lc(c.email))
        if kind:
            try:
                k = CustomerKind.parse(kind)
            except ValueError as e:
                raise ValidationError(f"Error: unknown customer kind: {kind}") from e
            checks.append(lambda c: c.kind is k)

        matches = (c for c in self.repo.stream_all() if all(check(c) for check in checks))
        return paginate(matches, page, size)

    def statistics(self) -> dict:
        domains = sorted(self.repo.email_domains().items(), key=lambda kv: kv[1], reverse=True)
        return {
            "total": self.repo.count(),
            "by_kind": self.repo.count_by_kind(),
            "email_domains": domains[:TOP_EMAIL_DOMAINS],
        }
