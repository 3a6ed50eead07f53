"""
상품 문서를 OpenSearch에 생성/수정/삭제/bulk 색인하는 IndexPort 구현체
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Sequence
from uuid import UUID
from opensearchpy import OpenSearch, helpers
from opensearchpy.exceptions import (
    ConflictError,
    NotFoundError,
    RequestError,
    TransportError,
)
from product_search.app.domain.ports import IndexPort
from product_search.app.domain.models import Product, BulkResult, BulkErrorItem
from product_search.app.platform.exceptions import (
    DocumentConflict,
    InvalidInput,
    ResourceNotFound,
    StoreUnavailable,
)

logger = logging.getLogger(__name__)


class OpenSearchIndexer(IndexPort):

    def __init__(self, client: OpenSearch, index_name: str) -> None:
        self.client = client
        self.index_name = index_name
        self._load_index_schema()

    def _load_index_schema(self) -> None:
        """
            인덱스 스키마를 JSON 파일에서 로드한다.
        """
        root_dir = Path(os.path.dirname(__file__)).resolve().parents[2]
        schema_path = root_dir / "resources/schema/product_index.json"
        with open(schema_path, 'r', encoding='utf-8') as f:
            self.index_schema = json.load(f)

    def create_index(self) -> str:
        """
            인덱스가 없으면 로드된 스키마로 생성한다.
            인덱스가 없으면 다른 모든 연산이 실패하므로 앱 기동 시 반드시 호출한다.

            Returns:
                인덱스 이름
        """
        try:
            if self.client.indices.exists(index=self.index_name):
                logger.info("Index '%s' already exists.", self.index_name)
                return self.index_name
            self.client.indices.create(index=self.index_name, body=self.index_schema)
        except TransportError as e:
            logger.error("create_index failed: index=%s error=%r", self.index_name, e)
            raise StoreUnavailable(self.index_name, "create_index") from e
        logger.info("Index '%s' created successfully.", self.index_name)
        return self.index_name

    def create(self, product: Product) -> str:
        """
            문서를 생성한다. 같은 id 가 이미 있으면 DocumentConflict.

            Args:
                product: 상품 문서
            Returns:
                생성된 문서 id
        """
        doc_id = str(product.id)
        try:
            res = self.client.create(
                index=self.index_name, id=doc_id, body=product.to_document())
        except ConflictError as e:
            raise DocumentConflict(doc_id) from e
        except RequestError as e:
            raise InvalidInput(f"document {doc_id} rejected by store") from e
        except TransportError as e:
            logger.error("create failed: id=%s error=%r", doc_id, e)
            raise StoreUnavailable(self.index_name, "create") from e
        return res.get("_id", doc_id)

    def update(self, product: Product) -> None:
        """
            문서를 부분 갱신한다(doc merge). 문서가 없으면 ResourceNotFound.
        """
        doc_id = str(product.id)
        try:
            self.client.update(
                index=self.index_name, id=doc_id, body={"doc": product.to_document()})
        except NotFoundError as e:
            raise ResourceNotFound("product", f"product {doc_id} not found") from e
        except RequestError as e:
            raise InvalidInput(f"document {doc_id} rejected by store") from e
        except TransportError as e:
            logger.error("update failed: id=%s error=%r", doc_id, e)
            raise StoreUnavailable(self.index_name, "update") from e

    def delete(self, doc_id: UUID) -> None:
        """
            문서를 id 로 삭제한다. 문서가 없으면 ResourceNotFound.
        """
        try:
            self.client.delete(index=self.index_name, id=str(doc_id))
        except NotFoundError as e:
            raise ResourceNotFound("product", f"product {doc_id} not found") from e
        except TransportError as e:
            logger.error("delete failed: id=%s error=%r", doc_id, e)
            raise StoreUnavailable(self.index_name, "delete") from e

    def bulk_index(self, products: Sequence[Product]) -> BulkResult:
        """
            상품들을 bulk 로 색인한다(_id = 문서 id, 이미 있으면 덮어씀).

            Args:
                products: 상품 문서 목록
            Returns:
                색인 결과(색인 성공 건수, 실패 상세)
        """
        def actions():
            for p in products:
                yield {
                    "_op_type": "index",
                    "_index": self.index_name,
                    "_id": str(p.id),
                    "_source": p.to_document(),
                }

        try:
            ok, errors = helpers.bulk(self.client, actions(), raise_on_error=False)
        except NotFoundError as e:
            logger.error("bulk_index failed: index=%s error=%r", self.index_name, e)
            raise ResourceNotFound("index", f"index {self.index_name} not found") from e
        except TransportError as e:
            logger.error("bulk_index failed: count=%s error=%r", len(products), e)
            raise StoreUnavailable(self.index_name, "bulk_index") from e

        err_items: list[BulkErrorItem] = []
        for e in errors or []:
            item = e.get("index", {})
            err_items.append(BulkErrorItem(
                doc_id=str(item.get("_id", "")),
                status=item.get("status"),
                reason=json.dumps(item.get("error", e), ensure_ascii=False, default=str)))
        if err_items:
            logger.warning("bulk_index: %s item(s) failed", len(err_items))
        return BulkResult(indexed=ok, errors=err_items)
