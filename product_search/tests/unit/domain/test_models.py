from datetime import datetime
from uuid import UUID
import pytest

from product_search.app.domain.models import (
    Category,
    Brand,
    Manufacturer,
    Product,
    PageRequest,
    BulkErrorItem,
    BulkResult,
)


def test_product_fills_missing_strings_with_empty(elastic_id):
    """
    문자열 필드에 None 이 들어오면 "" 로 채워지는지 검증
    """
    p = Product(id=elastic_id, title=None, erp_code=None, description=None, image_url=None, slug=None)

    assert p.title == ""
    assert p.erp_code == ""
    assert p.description == ""
    assert p.image_url == ""
    assert p.slug == ""
    assert p.category is None


def test_reference_entities_fill_null_strings_with_empty():
    c = Category.model_validate({"id": 1, "name": None, "slug": None})
    m = Manufacturer.model_validate({"id": 3, "contactInfo": None, "address": None})

    assert c.name == ""
    assert c.slug == ""
    assert m.contact_info == ""
    assert m.address == ""
    # 문자열이 아닌 필드는 그대로 None
    assert Category.model_validate({"createdDate": None}).created_date is None


def test_product_requires_document_id():
    with pytest.raises(Exception):
        _ = Product(title="no id")


def test_product_document_uses_camel_case(elastic_id):
    p = Product(
        id=elastic_id,
        product_id=17,
        erp_code="AC-001",
        image_url="https://img.test/1.png",
        is_deleted=True,
        created_date=datetime(2024, 1, 1),
        manufacturer=Manufacturer(name="Acme Works", contact_info="info@acme.test"),
    )
    doc = p.to_document()

    assert doc["id"] == str(elastic_id)
    assert doc["productId"] == 17
    assert doc["erpCode"] == "AC-001"
    assert doc["imageUrl"] == "https://img.test/1.png"
    assert doc["isDeleted"] is True
    assert doc["createdDate"] == "2024-01-01T00:00:00"
    assert doc["manufacturer"]["contactInfo"] == "info@acme.test"
    assert "erp_code" not in doc


def test_reference_entities_accept_camel_case_input():
    c = Category.model_validate({"id": 1, "name": "Tools", "isDeleted": True, "createdBy": 9})
    b = Brand.model_validate({"id": 2, "name": "Acme"})
    m = Manufacturer.model_validate({"id": 3, "contactInfo": "tel", "address": "addr"})

    assert c.is_deleted is True and c.created_by == 9
    assert b.slug == ""
    assert m.contact_info == "tel"
    assert m.address == "addr"


def test_page_request_offset_and_limit():
    assert PageRequest(page=1, size=10).offset == 0
    assert PageRequest(page=3, size=10).offset == 20
    assert PageRequest(page=3, size=10).limit == 10
    # 검증하지 않음
    assert PageRequest(page=0, size=5).offset == -5


def test_bulk_result_defaults_and_validation():
    err = BulkErrorItem(doc_id="a1", status=400, reason="mapper_parsing_exception")
    res = BulkResult(indexed=3, errors=[err])

    assert res.indexed == 3
    assert res.errors[0].doc_id == "a1"
    assert BulkResult(indexed=0).errors == []

    with pytest.raises(Exception):
        _ = BulkResult(indexed=-1)
