import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from fashion_shop.repositories.product_repo import ProductRepository
from fashion_shop.schemas.product_schema import product_to_dict
from fashion_shop.utils.validation import FieldError, validate_product, validate_product_update

log = logging.getLogger(__name__)


class ProductServiceException(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class ProductValidationError(ProductServiceException):
    def __init__(self, message: str, errors: Optional[List[FieldError]] = None, **extra):
        super().__init__(message)
        self.errors = errors or []
        self.extra = extra

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        if self.errors:
            body["errors"] = [e.to_dict() for e in self.errors]
        body.update(self.extra)
        return body


class ProductNotFound(ProductServiceException):
    status_code = 404

    def __init__(self, message: str = "Product not found!"):
        super().__init__(message)


class DuplicateProduct(ProductServiceException):
    def __init__(self, message: str = "Product with this name already exists"):
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "error": "Duplicate product name"}


class StorageError(ProductServiceException):
    status_code = 500

    def to_dict(self) -> Dict[str, Any]:
        return {"message": "Server error", "error": self.message}


def require_product_name(body: Mapping[str, Any]) -> str:
    name = body.get("Product Name")
    name = name.strip() if isinstance(name, str) else name
    if not name:
        raise ProductValidationError("Product Name is required")
    return name


class ProductService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepository(db)

    def add(self, body: Mapping[str, Any]) -> Dict[str, Any]:
        result = validate_product(body)
        if not result.ok:
            log.info("add-product rejected: %s", [e.field for e in result.errors])
            raise ProductValidationError("Validation failed", result.errors)
        try:
            p = self.repo.create(result.data)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            log.info("duplicate product name %r", result.data["Product Name"])
            raise DuplicateProduct()
        except SQLAlchemyError as e:
            self.db.rollback()
            log.error("insert into %s failed", self.repo.collection, exc_info=True)
            raise StorageError(str(e))
        self.db.refresh(p)
        log.info("added product %r", p.product_name)
        return product_to_dict(p)

    def update(self, body: Mapping[str, Any]) -> Dict[str, Any]:
        name = require_product_name(body)
        result = validate_product_update(body)
        if not result.ok:
            raise ProductValidationError("Validation failed", result.errors)
        try:
            p = self.repo.update_by_name(name, result.data)
            if not p:
                raise ProductNotFound()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            log.error("update in %s failed", self.repo.collection, exc_info=True)
            raise StorageError(str(e))
        self.db.refresh(p)
        log.info("updated product %r fields=%s", name, sorted(result.data))
        return product_to_dict(p)

    def delete(self, body: Mapping[str, Any]) -> Dict[str, Any]:
        name = require_product_name(body)
        try:
            p = self.repo.delete_by_name(name)
            if not p:
                raise ProductNotFound()
            # serialize before commit expires the instance
            deleted = product_to_dict(p)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            log.error("delete from %s failed", self.repo.collection, exc_info=True)
            raise StorageError(str(e))
        log.info("deleted product %r", name)
        return deleted
