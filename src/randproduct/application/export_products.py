"""Application service: Export Products use case (query).

Renders every stored record as CSV, JSON or XML text. Field names follow
the record layout: ``name``, ``description``, ``ID``, ``cost``.
"""

from __future__ import annotations

import csv
import io
import json
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterable

from randproduct.domain.exceptions import ValidationError
from randproduct.domain.model.product import Product
from randproduct.domain.repository.product_repository import ProductRepository

FIELDS = ("name", "description", "ID", "cost")


def _as_row(product: Product) -> dict[str, object]:
    return {
        "name": product.name,
        "description": product.description,
        "ID": product.id,
        "cost": product.cost,
    }


def to_csv(products: Iterable[Product]) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=FIELDS, lineterminator="\n")
    writer.writeheader()
    for product in products:
        writer.writerow(_as_row(product))
    return buffer.getvalue()


def to_json(products: Iterable[Product]) -> str:
    return json.dumps([_as_row(p) for p in products], indent=2) + "\n"


def to_xml(products: Iterable[Product]) -> str:
    root = ET.Element("Products")
    for product in products:
        node = ET.SubElement(root, "Product")
        for key, value in _as_row(product).items():
            ET.SubElement(node, key).text = str(value)
    ET.indent(root)
    return ET.tostring(root, encoding="unicode") + "\n"


FORMATTERS: dict[str, Callable[[Iterable[Product]], str]] = {
    "csv": to_csv,
    "json": to_json,
    "xml": to_xml,
}


class ExportProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, fmt: str) -> str:
        formatter = FORMATTERS.get(fmt.lower())
        if formatter is None:
            raise ValidationError(
                f"Unknown export format '{fmt}'. Expected one of: {', '.join(FORMATTERS)}",
                field="format",
            )
        return formatter(self._product_repo.scan())
