"""Tests for the JSON document codec."""

import json
from decimal import Decimal

import pytest

from stockmaster.domain.model.app_state import AppState
from stockmaster.domain.model.product import Product
from stockmaster.domain.model.project import Project
from stockmaster.domain.model.stock_log import StockLog
from stockmaster.domain.model.value_objects import MovementType
from stockmaster.infrastructure.persistence import document_codec
from stockmaster.infrastructure.persistence.document_codec import DocumentFormatError


def _state() -> AppState:
    project = Project(
        id="1700000000000",
        name="Shop A",
        description="Main counter",
        products=(
            Product(
                id="p1", title="Widget", mrp=Decimal("19.99"), stock=3,
                image="https://picsum.photos/400/400", category="General",
                created_at=1700000000100,
            ),
        ),
        history=(
            StockLog(
                id="l1", product_id="gone", type=MovementType.OUT,
                quantity=15, timestamp=1700000000200,
            ),
        ),
        created_at=1700000000000,
    )
    return AppState(projects=(project, Project(id="2", name="Empty")), active_project_id="2")


class TestEncoding:

    def test_document_shape_uses_camel_case(self):
        raw = document_codec.state_to_raw(_state())

        assert set(raw) == {"projects", "activeProjectId"}
        project = raw["projects"][0]
        assert set(project) == {"id", "name", "description", "products", "history", "createdAt"}
        assert project["products"][0] == {
            "id": "p1",
            "image": "https://picsum.photos/400/400",
            "title": "Widget",
            "mrp": 19.99,
            "stock": 3,
            "category": "General",
            "createdAt": 1700000000100,
        }
        assert project["history"][0] == {
            "id": "l1",
            "productId": "gone",
            "type": "OUT",
            "quantity": 15,
            "timestamp": 1700000000200,
        }

    def test_whole_prices_written_as_integers(self):
        product = Product(id="p", title="T", mrp=Decimal("100.00"), stock=1)
        assert document_codec.product_to_raw(product)["mrp"] == 100


class TestDecoding:

    def test_round_trip_identity(self):
        state = _state()
        assert document_codec.loads_state(document_codec.dumps_state(state)) == state

    def test_empty_state_round_trip(self):
        text = document_codec.dumps_state(AppState.empty())
        assert json.loads(text) == {"projects": [], "activeProjectId": None}
        assert document_codec.loads_state(text) == AppState.empty()

    def test_optional_fields_get_defaults(self):
        project = document_codec.loads_project(json.dumps({
            "id": "x", "name": "Bare",
            "products": [{"id": "p", "title": "T", "mrp": 5, "stock": 2}],
            "history": [],
        }))
        assert project.description == ""
        assert project.created_at == 0
        assert project.products[0].category == "General"

    def test_dangling_active_id_is_dropped(self):
        text = json.dumps({"projects": [], "activeProjectId": "ghost"})
        assert document_codec.loads_state(text).active_project_id is None

    @pytest.mark.parametrize(
        "text",
        [
            "not json",
            "[]",
            '{"activeProjectId": null}',
            '{"projects": {}, "activeProjectId": null}',
            '{"projects": [{"id": "1", "name": "A", "products": [], "history": [{"id": "l",'
            ' "productId": "p", "type": "SIDEWAYS", "quantity": 1, "timestamp": 0}]}],'
            ' "activeProjectId": null}',
            '{"projects": [{"id": "1", "name": "A", "products": [{"id": "p", "title": "T",'
            ' "mrp": "cheap", "stock": 1}], "history": []}], "activeProjectId": null}',
            '{"projects": [{"id": "1", "name": "A", "products": [{"id": "p", "title": "T",'
            ' "mrp": 1, "stock": 1.5}], "history": []}], "activeProjectId": null}',
        ],
    )
    def test_malformed_documents_rejected(self, text):
        with pytest.raises(DocumentFormatError):
            document_codec.loads_state(text)

    def test_project_requires_products_and_history(self):
        with pytest.raises(DocumentFormatError, match="products"):
            document_codec.loads_project('{"id": "1", "name": "A", "history": []}')
