"""Reference invoice record, as produced upstream for ``accounting/generate-invoice``."""

from __future__ import annotations

from typing import Any

EXEMPLAR: dict[str, Any] = {
    "invoiceNumber": "INV-2026-0142",
    "issueDate": "2026-02-15",
    "dueDate": "2026-03-17",
    "billTo": {
        "name": "Westfield Design Co.",
        "address": "1240 Oak Avenue, Suite 300, Portland, OR 97201",
        "email": "accounts@westfielddesign.com",
    },
    "billFrom": {
        "name": "Summit Creative Studio",
        "address": "890 Pine Street, Denver, CO 80202",
    },
    "lineItems": [
        {"description": "Brand identity design", "quantity": 1, "unitPrice": 2500.00},
        {"description": "Website mockup, 5 pages", "quantity": 5, "unitPrice": 400.00},
        {"description": "Social media template set", "quantity": 1, "unitPrice": 750.00},
    ],
    "taxRate": 8,
    "notes": "Payment via ACH or check. Late payments subject to 1.5% monthly fee.",
    "paymentTerms": "Net 30",
}
