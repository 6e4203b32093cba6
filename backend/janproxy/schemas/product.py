from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Literal, Optional

DataSource = Literal["api", "mock", "fallback"]


class CanonicalProduct(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    name: Optional[str] = None
    manufacturer_name: Optional[str] = None
    model_name: Optional[str] = None
    specs: Optional[Dict[str, Any]] = None

    def is_empty(self) -> bool:
        return (
            self.name is None
            and self.manufacturer_name is None
            and self.model_name is None
            and self.specs is None
        )


class ProductLookupResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    jan_code: str = Field(alias="janCode")
    normalized_jan_code: str = Field(alias="normalizedJanCode")
    data: CanonicalProduct
    data_source: DataSource = Field(alias="dataSource")
    message: Optional[str] = None   # why synthesized data was returned
    raw: Optional[Any] = None       # upstream payload, only with debug=true
    timestamp: str


class ErrorDetail(BaseModel):
    error: str
    usage: Optional[str] = None
    received: Optional[str] = None
