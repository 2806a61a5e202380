
from uuid import UUID


QUOTE_CODE = 1084
EMAIL_CODE = 4202
INVOICE_CODE = 1090
ACCOUNT_CODE = 1
UNKNOWN_CODE = 99999

RECORD_ID = UUID("7d3f4a1e-2b6c-4f0a-9e51-0c8d2a6b1f33")
INVOICE_ID = UUID("a0b1c2d3-e4f5-4a6b-8c7d-9e0f1a2b3c4d")
ACCOUNT_ID = UUID("11111111-2222-4333-8444-555555555555")


def make_url(*params: str) -> str:
    return "https://fieldboss.crm.dynamics.com/main.aspx?" + "&".join(params)


quote_url = make_url(f"etc={QUOTE_CODE}", f"id={RECORD_ID}", "pagetype=entityrecord")
email_url = make_url(f"etc={EMAIL_CODE}", f"id={RECORD_ID}")
unknown_url = make_url(f"etc={UNKNOWN_CODE}", f"id={RECORD_ID}")
