"""
Banner Domain Models

Promotional banners for the home page carousel. Each banner carries a
free-form layout: a list of visual elements (text, badge, icon, image)
positioned on a fixed-size canvas by the admin banner editor. List order
is paint order, the last element is drawn on top.
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List, Union, Literal, Dict, Any, Annotated
from datetime import datetime


# Editor canvas geometry (pixels)
CANVAS_WIDTH = 1280
CANVAS_HEIGHT = 320
MIN_MARGIN = 24

ICON_NAMES = ("FaStar", "FaHeart", "FaBolt", "FaGift")
DEFAULT_ICON = "FaStar"


class TextStyle(BaseModel):
    model_config = ConfigDict(extra="allow")

    color: str = "#fff"
    font_weight: int = 600
    font_size: int = 20
    letter_spacing: Optional[float] = 0.5
    text_align: Literal["left", "center", "right"] = "left"


class BadgeStyle(BaseModel):
    model_config = ConfigDict(extra="allow")

    background: str = "rgba(255,255,255,0.18)"
    color: str = "#fff"
    font_weight: int = 600
    border_radius: int = 18
    font_size: int = 16
    padding: str = "6px 18px"
    border: str = "1.5px solid #fff"
    box_shadow: str = "0 2px 8px rgba(0,0,0,0.04)"
    letter_spacing: Optional[float] = 0.5
    text_align: Literal["center"] = "center"


class ElementBase(BaseModel):
    id: str = Field(..., min_length=1)
    x: float = 0
    y: float = 0
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)


class TextElement(ElementBase):
    type: Literal["text"] = "text"
    text: str = "New Text"
    style: TextStyle = Field(default_factory=TextStyle)


class BadgeElement(ElementBase):
    type: Literal["badge"] = "badge"
    text: str = "Exclusive"
    style: BadgeStyle = Field(default_factory=BadgeStyle)


class IconElement(ElementBase):
    type: Literal["icon"] = "icon"
    icon: str = DEFAULT_ICON
    style: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("icon")
    @classmethod
    def known_icon(cls, value: str) -> str:
        return value if value in ICON_NAMES else DEFAULT_ICON


class ImageElement(ElementBase):
    type: Literal["image"] = "image"
    image_url: str = ""
    style: Dict[str, Any] = Field(default_factory=dict)


BannerElement = Annotated[
    Union[TextElement, BadgeElement, IconElement, ImageElement],
    Field(discriminator="type"),
]

ELEMENT_TYPES = {
    "text": TextElement,
    "badge": BadgeElement,
    "icon": IconElement,
    "image": ImageElement,
}


class BackgroundOffset(BaseModel):
    x: float = 50
    y: float = 50


class Banner(BaseModel):
    """
    Banner domain model

    Styling fields (text_color, font_size, ...) hold the CSS utility
    classes the storefront applies to the title overlay.
    """

    id: int = Field(..., description="Banner ID")
    title: str = Field(..., description="Banner title")
    subtitle: Optional[str] = None
    image_url: str = Field(..., description="Background image URL")
    link_url: Optional[str] = None
    is_active: bool = True
    display_order: int = Field(0, description="Carousel position, ascending")
    text_color: str = "#ffffff"
    font_size: str = "text-2xl"
    font_weight: str = "font-normal"
    font_style: str = "not-italic"
    text_align: str = "text-center"
    background_color: str = "transparent"
    layout: List[BannerElement] = Field(default_factory=list)
    background_image: Optional[str] = None
    background_offset: BackgroundOffset = Field(default_factory=BackgroundOffset)
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")


class BannerPayload(BaseModel):
    """
    Body for creating or replacing a banner

    Title and image_url are required; every styling field falls back to
    its default when omitted or null.
    """
    title: str
    image_url: str
    subtitle: Optional[str] = None
    link_url: Optional[str] = None
    is_active: Optional[bool] = None
    display_order: Optional[int] = None
    text_color: Optional[str] = None
    font_size: Optional[str] = None
    font_weight: Optional[str] = None
    font_style: Optional[str] = None
    text_align: Optional[str] = None
    background_color: Optional[str] = None
    layout: Optional[List[BannerElement]] = None
    background_image: Optional[str] = None
    background_offset: Optional[BackgroundOffset] = None

    @field_validator("title", "image_url")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


class ElementCreate(BaseModel):
    """Request to add an element to a banner layout"""
    type: Literal["text", "badge", "icon", "image"]
    id: Optional[str] = None


class ElementMove(BaseModel):
    x: float
    y: float


class ElementResize(BaseModel):
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    x: Optional[float] = None
    y: Optional[float] = None
