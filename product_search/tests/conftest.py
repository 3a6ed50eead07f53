import sys
from pathlib import Path
from uuid import UUID

# 프로젝트 루트 경로를 sys.path에 추가 (…/<project-root>)
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest


@pytest.fixture
def product_payload():
    """ProductDto JSON(camelCase) 예시"""
    return {
        "id": 17,
        "elasticId": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
        "erpCode": "AC-001",
        "title": "Acme Anvil",
        "description": "Heavy anvil",
        "stock": 4,
        "price": 120.5,
        "imageUrl": None,
        "slug": "acme-anvil",
        "isDeleted": False,
        "createdDate": "2024-01-01T00:00:00",
        "createdBy": 1,
        "category": {"id": 1, "name": "Tools", "description": "Hand tools", "slug": "tools"},
        "brand": {"id": 2, "name": "Acme", "description": "Acme Corp", "slug": "acme"},
        "manufacturer": {
            "id": 3, "name": "Acme Works", "contactInfo": "info@acme.test",
            "address": "Desert Rd. 1", "slug": "acme-works",
        },
    }


@pytest.fixture
def elastic_id():
    return UUID("3fa85f64-5717-4562-b3fc-2c963f66afa6")
