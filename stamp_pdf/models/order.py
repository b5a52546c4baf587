from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from stamp_pdf.models.render import RenderRequest


class OrderDetails(BaseModel):
    """
    Free-form order form. Values are printed into the mail as they come;
    the storefront sends numbers, strings and the odd nested object.
    """
    model_config = ConfigDict(extra="allow")
    id: Optional[Any] = None
    companyName: Optional[Any] = None
    city: Optional[Any] = None
    address: Optional[Any] = None
    contactEmail: Optional[Any] = None
    quantity: Optional[Any] = None
    color: Optional[Any] = None
    externalId: Optional[Any] = None


class ProductMeta(BaseModel):
    model_config = ConfigDict(extra="allow")
    modelName: Optional[Any] = None
    size: Optional[Any] = None
    fonts: Optional[Any] = None


class SendOrderRequest(RenderRequest):
    """
    Render payload plus the order form. Everything below is optional;
    missing pieces show up as blanks in the mail, never as errors.
    """
    meta: Optional[ProductMeta] = None
    orderDetails: Optional[OrderDetails] = None
    externalId: Optional[Any] = None

    @field_validator("meta", "orderDetails", mode="before")
    @classmethod
    def _only_objects(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, BaseModel)) else None

    def order(self) -> OrderDetails:
        return self.orderDetails or OrderDetails()

    def product(self) -> ProductMeta:
        return self.meta or ProductMeta()

    def external_id(self) -> Optional[Any]:
        # top-level wins; older storefront builds nest it in orderDetails
        if self.externalId not in (None, ""):
            return self.externalId
        return self.order().externalId
