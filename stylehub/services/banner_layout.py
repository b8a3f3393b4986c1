"""
Banner Layout Editing
Pure operations on a banner's element list, used by the admin banner editor.

Every operation returns a new list and leaves its input untouched. List
order is paint order: the last element is drawn on top.
"""
import time
from typing import Any, Dict, List, Optional

from stylehub.core.exceptions import NotFoundError
from stylehub.domain.banner import (
    BannerElement, TextElement, BadgeElement, IconElement, ImageElement,
    TextStyle, ELEMENT_TYPES, CANVAS_WIDTH, CANVAS_HEIGHT, MIN_MARGIN,
)


# New elements are dropped near the canvas centre
NEW_ELEMENT_X = CANVAS_WIDTH / 2 - 90
NEW_ELEMENT_Y = CANVAS_HEIGHT / 2 - 24

GEOMETRY_KEYS = ("x", "y", "width", "height")


def default_layout() -> List[BannerElement]:
    """The starter layout shown for a banner without elements"""
    return [
        BadgeElement(id="badge", text="Exclusive", x=20, y=20, width=110, height=36),
        TextElement(
            id="mainText", text="BRAND FEST", x=30, y=70, width=300, height=48,
            style=TextStyle(font_weight=700, font_size=36),
        ),
        TextElement(
            id="subText", text="Min 50% OFF", x=30, y=120, width=250, height=40,
            style=TextStyle(font_weight=700, font_size=28),
        ),
        TextElement(
            id="descText", text="Top Brands", x=30, y=170, width=200, height=32,
            style=TextStyle(font_weight=400, font_size=20),
        ),
        IconElement(id="icon", icon="FaStar", x=370, y=30, width=36, height=36),
    ]


def clamp(value: float, lower: float, upper: float) -> float:
    # lower wins when the element is larger than the usable area
    return max(lower, min(value, upper))


def clamp_position(element: BannerElement, x: float, y: float) -> Dict[str, float]:
    """Keep the element at least MIN_MARGIN away from every canvas edge"""
    return {
        "x": clamp(x, MIN_MARGIN, CANVAS_WIDTH - element.width - MIN_MARGIN),
        "y": clamp(y, MIN_MARGIN, CANVAS_HEIGHT - element.height - MIN_MARGIN),
    }


def clamp_size(width: float, height: float) -> Dict[str, float]:
    """Cap a size to the area inside the canvas margins"""
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    return {
        "width": min(width, CANVAS_WIDTH - 2 * MIN_MARGIN),
        "height": min(height, CANVAS_HEIGHT - 2 * MIN_MARGIN),
    }


def place(element: BannerElement, x: float, y: float, width: float, height: float) -> BannerElement:
    """Apply a new geometry, capped and clamped to the canvas"""
    if element.type == "icon" and (width, height) != (element.width, element.height):
        raise ValueError("Icon elements cannot be resized")

    sized = element.model_copy(update=clamp_size(width, height))
    return sized.model_copy(update=clamp_position(sized, x, y))


def find_index(layout: List[BannerElement], element_id: str) -> int:
    for index, element in enumerate(layout):
        if element.id == element_id:
            return index
    raise NotFoundError(f"Layout element {element_id} not found")


def new_element_id(element_type: str, layout: List[BannerElement]) -> str:
    element_id = f"{element_type}_{int(time.time() * 1000)}"
    existing = {element.id for element in layout}
    suffix = 1
    candidate = element_id
    while candidate in existing:
        candidate = f"{element_id}_{suffix}"
        suffix += 1
    return candidate


def build_element(element_type: str, element_id: str) -> BannerElement:
    if element_type == "text":
        return TextElement(id=element_id, x=NEW_ELEMENT_X, y=NEW_ELEMENT_Y, width=180, height=36)
    if element_type == "badge":
        return BadgeElement(id=element_id, x=NEW_ELEMENT_X, y=NEW_ELEMENT_Y - 40, width=110, height=36)
    if element_type == "icon":
        return IconElement(id=element_id, x=NEW_ELEMENT_X + 200, y=NEW_ELEMENT_Y - 60, width=36, height=36)
    if element_type == "image":
        return ImageElement(id=element_id, x=NEW_ELEMENT_X + 60, y=NEW_ELEMENT_Y + 60, width=80, height=80)
    raise ValueError(f"Unknown element type: {element_type}")


def add_element(
    layout: List[BannerElement],
    element_type: str,
    element_id: Optional[str] = None
) -> List[BannerElement]:
    """Append a new element of the given type with its default content"""
    if element_id and any(element.id == element_id for element in layout):
        raise ValueError(f"Layout element {element_id} already exists")

    element = build_element(element_type, element_id or new_element_id(element_type, layout))
    return list(layout) + [element]


def update_element(
    layout: List[BannerElement],
    element_id: str,
    updates: Dict[str, Any]
) -> List[BannerElement]:
    """
    Merge updates into an element

    Top-level keys replace, `style` is merged key by key. The element id
    and type never change. Geometry keys go through the same canvas
    rules as move and resize.
    """
    index = find_index(layout, element_id)
    current = layout[index]

    style_updates = updates.get("style") or {}
    if not isinstance(style_updates, dict):
        raise ValueError("style must be an object")

    data = current.model_dump()
    for key, value in updates.items():
        if key in ("id", "type", "style"):
            continue
        data[key] = value
    data["style"] = {**data.get("style", {}), **style_updates}

    # pydantic's ValidationError is a ValueError
    updated = ELEMENT_TYPES[current.type].model_validate(data)
    if any(key in updates for key in GEOMETRY_KEYS):
        moved = place(current, updated.x, updated.y, updated.width, updated.height)
        updated = updated.model_copy(update={key: getattr(moved, key) for key in GEOMETRY_KEYS})

    result = list(layout)
    result[index] = updated
    return result


def move_element(layout: List[BannerElement], element_id: str, x: float, y: float) -> List[BannerElement]:
    index = find_index(layout, element_id)
    element = layout[index]

    result = list(layout)
    result[index] = element.model_copy(update=clamp_position(element, x, y))
    return result


def resize_element(
    layout: List[BannerElement],
    element_id: str,
    width: float,
    height: float,
    x: Optional[float] = None,
    y: Optional[float] = None
) -> List[BannerElement]:
    """Resize, optionally repositioning (resizing from a left/top handle moves the origin)"""
    index = find_index(layout, element_id)
    element = layout[index]

    result = list(layout)
    result[index] = place(
        element,
        element.x if x is None else x,
        element.y if y is None else y,
        width,
        height,
    )
    return result


def remove_element(layout: List[BannerElement], element_id: str) -> List[BannerElement]:
    find_index(layout, element_id)
    return [element for element in layout if element.id != element_id]


def bring_to_front(layout: List[BannerElement], element_id: str) -> List[BannerElement]:
    index = find_index(layout, element_id)
    result = list(layout)
    element = result.pop(index)
    result.append(element)
    return result


def send_to_back(layout: List[BannerElement], element_id: str) -> List[BannerElement]:
    index = find_index(layout, element_id)
    result = list(layout)
    element = result.pop(index)
    result.insert(0, element)
    return result
