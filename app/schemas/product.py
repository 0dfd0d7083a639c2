from pydantic import BaseModel, ConfigDict, Field


class ProductRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    price: int = Field(description="Price in the smallest currency unit")
    description: str
    quantity: int


class ProductImages(BaseModel):
    product_id: str
    images: list[str]
    fallback_src: str = Field(description="Shown in place of an image that fails to load")
