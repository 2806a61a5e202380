import pytest

from record_url_resolution.catalog.in_memory import InMemoryCatalog
from record_url_resolution.entity_types.entity_reference import EntityReference
from tests.test_data import (
    ACCOUNT_CODE,
    EMAIL_CODE,
    INVOICE_CODE,
    INVOICE_ID,
    QUOTE_CODE,
    RECORD_ID,
)


@pytest.fixture
def catalog():
    # one metadata row per known type code
    cat = InMemoryCatalog()
    cat.register_entity(QUOTE_CODE, "quote")
    cat.register_entity(EMAIL_CODE, "email")
    cat.register_entity(INVOICE_CODE, "invoice")
    cat.register_entity(ACCOUNT_CODE, "account")
    return cat


@pytest.fixture
def email_regarding_invoice(catalog):
    catalog.put_record(
        "email", RECORD_ID, regardingobjectid=EntityReference("invoice", INVOICE_ID)
    )
    return catalog
