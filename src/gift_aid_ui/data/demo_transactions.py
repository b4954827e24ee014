"""
Demo Sales Invoice Transactions in the raw backend row shape.

Rows are generated from a handful of donor templates so the demo has
enough records to paginate. A few rows carry awkward values on purpose:
an account name with a comma and quotes (CSV quoting) and an amount that
is not numeric (shown as "NaN").
"""

from datetime import date, timedelta

DEMO_COMPANIES = [
    {"Id": "CMP-001", "Name": "Northfield Trust"},
    {"Id": "CMP-002", "Name": "Riverside Foundation"},
]

DEMO_PRODUCTS = [
    {"Id": "PRD-001", "Name": "Regular Donation", "NominalCode": "4000"},
    {"Id": "PRD-002", "Name": "Event Ticket", "NominalCode": "4100"},
    {"Id": "PRD-003", "Name": "Appeal Gift", "NominalCode": "4200"},
]

_DONORS = [
    ("Ada", "Lovelace", "NW1 2DB", "Lovelace Household"),
    ("Alan", "Turing", "M13 9PL", "Turing & Co"),
    ("Grace", "Hopper", "EH1 1YZ", "Hopper Family"),
    ("Tim", "Berners-Lee", "SW1A 1AA", "Berners-Lee Estate"),
    ("Mary", "Somerville", "OX1 3BG", 'Somerville, "Mary" Trust'),
]

_FIRST_INVOICE_DATE = date(2025, 11, 3)


def _row(index: int) -> dict:
    first, last, postcode, account = _DONORS[index % len(_DONORS)]
    product = DEMO_PRODUCTS[index % len(DEMO_PRODUCTS)]
    company = DEMO_COMPANIES[index % len(DEMO_COMPANIES)]
    amount = "n/a" if index == 17 else round(5 + (index * 7.35) % 95, 2)
    return {
        "Id": f"SIT-{index + 1:04d}",
        "invoiceDate": (_FIRST_INVOICE_DATE + timedelta(days=index)).isoformat(),
        "customerReference": f"CUST-{1000 + index % 9}",
        "salesInvoiceHeaderName": f"SIH-{2025_0000 + index}",
        "companyId": company["Id"],
        "companyName": company["Name"],
        "accountName": account,
        "contactFirstName": first,
        "contactLastName": last,
        "contactPostalCode": postcode,
        "productId": product["Id"],
        "productName": product["Name"],
        "nominalCode": product["NominalCode"],
        "salesVAT": "0.00",
        "paidAmount": amount,
        "analysis1": "GA-ELIGIBLE",
        "analysis2": f"Campaign {index % 4 + 1}",
        "analysis6": None,
        "giftAidStatus": "Submitted" if index % 6 == 5 else "Non-Submitted",
    }


DEMO_TRANSACTIONS = [_row(index) for index in range(36)]
