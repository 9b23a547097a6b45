"""Tests for the record-level use cases: show, list, update cost, export."""

import json
import xml.etree.ElementTree as ET

import pytest

from randproduct.application.export_products import ExportProductsHandler
from randproduct.application.list_products import ListProductsHandler
from randproduct.application.show_product import ShowProductHandler
from randproduct.application.update_cost import UpdateCostHandler
from randproduct.domain.exceptions import RecordOutOfRangeError, ValidationError
from randproduct.domain.model.product import Product
from tests.fakes import FakeProductRepository

BOLT = Product(id="000123", name="Bolt", description="Steel bolt", cost=1.50)
CUTTER = Product(id="000124", name="Bolt Cutter", description="Tool, heavy", cost=25.0)


def _repo() -> FakeProductRepository:
    return FakeProductRepository([BOLT, CUTTER])


class TestShowProduct:

    def test_one_based_number(self):
        dto = ShowProductHandler(_repo()).handle(2)
        assert dto.number == 2
        assert dto.name == "Bolt Cutter"
        assert dto.cost == "$25.00"

    @pytest.mark.parametrize("number", [0, 3])
    def test_out_of_range(self, number):
        with pytest.raises(RecordOutOfRangeError):
            ShowProductHandler(_repo()).handle(number)


class TestListProducts:

    def test_lists_in_order(self):
        rows = ListProductsHandler(_repo()).handle()
        assert [(r.number, r.id) for r in rows] == [(1, "000123"), (2, "000124")]

    def test_empty(self):
        assert ListProductsHandler(FakeProductRepository()).handle() == []


class TestUpdateCost:

    def test_updates_stored_cost(self):
        repo = _repo()
        dto = UpdateCostHandler(repo).handle(1, "2.25")
        assert dto.cost == "$2.25"
        assert repo.read_at(0).cost == 2.25
        assert repo.read_at(1) == CUTTER

    def test_negative_cost_rejected(self):
        repo = _repo()
        with pytest.raises(ValidationError, match="cannot be negative"):
            UpdateCostHandler(repo).handle(1, "-2")
        assert repo.read_at(0).cost == 1.50

    def test_unknown_record(self):
        with pytest.raises(RecordOutOfRangeError):
            UpdateCostHandler(_repo()).handle(5, "1")


class TestExportProducts:

    def test_csv(self):
        text = ExportProductsHandler(_repo()).handle("csv")
        assert text.splitlines() == [
            "name,description,ID,cost",
            "Bolt,Steel bolt,000123,1.5",
            'Bolt Cutter,"Tool, heavy",000124,25.0',
        ]

    def test_json(self):
        data = json.loads(ExportProductsHandler(_repo()).handle("JSON"))
        assert data[0] == {
            "name": "Bolt",
            "description": "Steel bolt",
            "ID": "000123",
            "cost": 1.5,
        }
        assert len(data) == 2

    def test_xml(self):
        root = ET.fromstring(ExportProductsHandler(_repo()).handle("xml"))
        assert root.tag == "Products"
        products = root.findall("Product")
        assert [p.findtext("name") for p in products] == ["Bolt", "Bolt Cutter"]
        assert products[1].findtext("cost") == "25.0"

    def test_unknown_format(self):
        with pytest.raises(ValidationError, match="Unknown export format"):
            ExportProductsHandler(_repo()).handle("yaml")
