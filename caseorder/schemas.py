from pydantic import BaseModel, Field
from typing import Annotated, Iterable, List, Optional
from datetime import date, datetime

# Request bodies keep every field optional at the type level: presence is
# checked by missing_fields() so a blank field gets the resource's own 400
# message instead of a generic schema error.

# columns are 32-bit INTEGER; anything wider is rejected here rather than by the driver
MAX_INT = 2**31 - 1
DbInt = Annotated[int, Field(ge=0, le=MAX_INT)]
DbId = Annotated[int, Field(ge=1, le=MAX_INT)]

class ArtworkIn(BaseModel):
    title: Optional[str] = None
    artist: Optional[str] = None
    image_path: Optional[str] = None  # filesystem path or URL

class ArtworkOut(BaseModel):
    artwork_id: int
    title: str
    artist: Optional[str] = None
    image_path: str
    class Config: from_attributes = True

class BgColorIn(BaseModel):
    bgcolor_name: Optional[str] = None
    hexcode_id: Optional[DbInt] = None

class BgColorOut(BaseModel):
    bgcolor_id: int
    bgcolor_name: str
    hexcode_id: int
    class Config: from_attributes = True

class FontIn(BaseModel):
    font_name: Optional[str] = None
    hexcode_id: Optional[DbInt] = None
    font_file_path: Optional[str] = None

class FontOut(BaseModel):
    font_id: int
    font_name: str
    hexcode_id: int
    font_file_path: str
    class Config: from_attributes = True

class FontColorIn(BaseModel):
    fontcolor_name: Optional[str] = None
    hexcode_id: Optional[DbInt] = None

class FontColorOut(BaseModel):
    fontcolor_id: int
    fontcolor_name: str
    hexcode_id: Optional[int] = None
    class Config: from_attributes = True

class OrderIn(BaseModel):
    artwork_id: Optional[DbId] = None
    font_id: Optional[DbId] = None
    fontcolor_id: Optional[DbId] = None
    normal_case_id: Optional[DbId] = None
    order_date: Optional[date] = None
    order_product_folder_name: Optional[str] = None
    order_goods_name: Optional[str] = None
    order_check1: bool = False
    order_check2: bool = False
    order_download: bool = False

class OrderOut(BaseModel):
    order_id: int
    artwork_id: int
    font_id: int
    fontcolor_id: int
    normal_case_id: int
    order_date: date
    order_product_folder_name: str
    order_goods_name: str
    order_check1: bool
    order_check2: bool
    order_download: bool
    created_at: Optional[datetime] = None
    class Config: from_attributes = True

class MessageOut(BaseModel):
    message: str


def missing_fields(body: BaseModel, required: Iterable[str]) -> List[str]:
    """Names of required fields that are null or blank."""
    out = []
    for name in required:
        value = getattr(body, name, None)
        if value is None or (isinstance(value, str) and not value.strip()):
            out.append(name)
    return out
