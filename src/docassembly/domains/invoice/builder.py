"""Invoice adapter: billing record -> section sequence.

The summary block is the only arithmetic in the pipeline.  Each figure is
taken from the record when present and derived otherwise:

    subtotal = record subtotal        | sum of line amounts
    tax      = record tax             | subtotal * taxRate / 100
    total    = record total           | subtotal + tax - discount

A discount is a reduction whatever its stored sign, so ``-10`` and ``10`` both
take ten off the total.

A line amount is the item's explicit ``amount``/``total`` when present,
otherwise ``quantity * unit price``.  Explicit values always win, even when
they disagree with the line items.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from docassembly.fields import (
    PLACEHOLDER,
    first_present,
    format_money,
    format_number,
    format_percent,
    is_present,
    normalize_group,
    resolve_number,
    resolve_text,
    to_display,
    to_number,
)
from docassembly.sections import Heading, ListSection, Section, Table, Text
from docassembly.tables import build_meta, prose_sections

ITEM_KEYS = ("items", "lineItems", "entries")
DESCRIPTION_KEYS = ("description", "name", "item", "service")
QUANTITY_KEYS = ("quantity", "qty", "hours", "units")
UNIT_PRICE_KEYS = ("unitPrice", "unitCost", "price", "rate")
LINE_AMOUNT_KEYS = ("amount", "total")

SUBTOTAL_KEYS = ("subtotal", "subTotal")
TAX_KEYS = ("tax", "taxAmount", "taxTotal")
TAX_RATE_KEYS = ("taxRate", "taxPercent", "vatRate")
DISCOUNT_KEYS = ("discount", "discountAmount")
TOTAL_KEYS = ("total", "totalDue", "amountDue", "grandTotal")

LINE_ITEM_HEADERS = ("Description", "Qty", "Unit Price", "Amount")
SUMMARY_HEADERS = ("Item", "Amount")


@dataclass(frozen=True)
class InvoiceTotals:
    """Resolved invoice figures; ``tax_rate`` is None when no rate was given."""

    subtotal: float
    tax: float
    discount: float
    total: float
    tax_rate: float | None = None


def line_quantity(item: Mapping[str, Any]) -> float:
    """Quantity of a line item; 1 when the item does not state one."""
    raw = first_present(item, *QUANTITY_KEYS)
    return 1.0 if raw is None else to_number(raw)


def line_amount(item: Mapping[str, Any]) -> float:
    explicit = first_present(item, *LINE_AMOUNT_KEYS)
    if explicit is not None:
        return to_number(explicit)
    return line_quantity(item) * resolve_number(item, *UNIT_PRICE_KEYS)


def compute_invoice_totals(data: Mapping[str, Any]) -> InvoiceTotals:
    """Resolve subtotal, tax, discount and total with explicit-value precedence."""
    group = normalize_group(first_present(data, *ITEM_KEYS), text_key=DESCRIPTION_KEYS[0])

    explicit_subtotal = first_present(data, *SUBTOTAL_KEYS)
    if explicit_subtotal is not None:
        subtotal = to_number(explicit_subtotal)
    else:
        subtotal = round(sum(line_amount(item) for item in group.records), 2)

    raw_rate = first_present(data, *TAX_RATE_KEYS)
    tax_rate = to_number(raw_rate) if raw_rate is not None else None

    explicit_tax = first_present(data, *TAX_KEYS)
    if explicit_tax is not None:
        tax = to_number(explicit_tax)
    else:
        tax = round(subtotal * (tax_rate or 0.0) / 100, 2)

    discount = abs(resolve_number(data, *DISCOUNT_KEYS))

    explicit_total = first_present(data, *TOTAL_KEYS)
    if explicit_total is not None:
        total = to_number(explicit_total)
    else:
        total = round(subtotal + tax - discount, 2)

    return InvoiceTotals(
        subtotal=subtotal, tax=tax, discount=discount, total=total, tax_rate=tax_rate
    )


def build_invoice_sections(data: Mapping[str, Any]) -> list[Section]:
    """Build invoice sections from an artifact's data record."""
    sections: list[Section] = []
    currency = first_present(data, "currency", "currencyCode")

    meta = build_meta(
        [
            ("Invoice #", resolve_text(data, "invoiceNumber", "number", "id")),
            ("Issue Date", resolve_text(data, "issueDate", "date", "invoiceDate")),
            ("Due Date", resolve_text(data, "dueDate")),
            ("Status", resolve_text(data, "status", default="pending")),
            ("Payment Terms", _payment_terms(data)),
            ("Currency", to_display(currency).upper()),
        ]
    )
    if meta:
        sections.append(meta)

    sections.extend(
        _party_sections("Bill From", first_present(data, "billFrom", "from", "seller", "vendor"))
    )
    sections.extend(
        _party_sections("Bill To", first_present(data, "billTo", "to", "client", "customer"))
    )

    group = normalize_group(first_present(data, *ITEM_KEYS), text_key=DESCRIPTION_KEYS[0])
    if group:
        sections.append(Heading(text="Line Items"))
        if group.structured:
            sections.append(
                Table(
                    headers=LINE_ITEM_HEADERS,
                    rows=[_line_item_row(item, currency) for item in group.records],
                )
            )
        else:
            sections.append(ListSection(items=group.labels))

    if group or any(
        first_present(data, *keys) is not None for keys in (SUBTOTAL_KEYS, TAX_KEYS, TOTAL_KEYS)
    ):
        sections.append(Heading(text="Summary"))
        sections.append(_summary_table(compute_invoice_totals(data), currency))

    sections.extend(
        prose_sections(
            "Payment Details",
            first_present(data, "paymentInstructions", "paymentDetails", "bankDetails"),
        )
    )
    sections.extend(prose_sections("Notes", first_present(data, "notes", "memo")))
    return sections


def _payment_terms(data: Mapping[str, Any]) -> str:
    # ``terms`` can also carry a clause list; only a plain string is a payment term
    terms = first_present(data, "paymentTerms", "terms")
    return to_display(terms) if isinstance(terms, str) else PLACEHOLDER


def _line_item_row(item: Mapping[str, Any], currency: Any) -> list[str]:
    price = first_present(item, *UNIT_PRICE_KEYS)
    return [
        resolve_text(item, *DESCRIPTION_KEYS),
        format_number(line_quantity(item)),
        format_money(price, currency) if price is not None else PLACEHOLDER,
        format_money(line_amount(item), currency),
    ]


def _summary_table(totals: InvoiceTotals, currency: Any) -> Table:
    tax_label = "Tax"
    if totals.tax_rate is not None:
        tax_label = f"Tax ({format_percent(totals.tax_rate)})"
    rows = [
        ["Subtotal", format_money(totals.subtotal, currency)],
        [tax_label, format_money(totals.tax, currency)],
    ]
    if totals.discount:
        rows.append(["Discount", format_money(-totals.discount, currency)])
    rows.append(["Total", format_money(totals.total, currency)])
    return Table(headers=SUMMARY_HEADERS, rows=rows)


def _party_sections(title: str, party: Any) -> list[Section]:
    if not is_present(party):
        return []
    if not isinstance(party, Mapping):
        return [Heading(text=title), Text(text=to_display(party))]
    meta = build_meta(
        [
            ("Name", resolve_text(party, "name", "contact")),
            ("Company", resolve_text(party, "company", "organization", "entity")),
            ("Address", _address(first_present(party, "address", "addressLines"))),
            ("Email", resolve_text(party, "email")),
            ("Phone", resolve_text(party, "phone", "telephone")),
        ]
    )
    return [Heading(text=title), meta] if meta else []


def _address(value: Any) -> str:
    if isinstance(value, Mapping):
        parts = [to_display(part) for part in value.values() if is_present(part)]
        return ", ".join(parts) or PLACEHOLDER
    return to_display(value)
