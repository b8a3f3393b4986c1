"""
Banner Service
Promotional banner management and layout editing for the admin panel
"""
import logging
from typing import Any, Callable, Dict, List, Optional

from stylehub.core.exceptions import NotFoundError
from stylehub.domain.banner import Banner, BannerPayload, BannerElement
from stylehub.repositories.banner_repository import BannerRepository
from stylehub.services import banner_layout

logger = logging.getLogger(__name__)


STYLE_DEFAULTS = {
    "is_active": True,
    "display_order": 0,
    "text_color": "#ffffff",
    "font_size": "text-2xl",
    "font_weight": "font-normal",
    "font_style": "not-italic",
    "text_align": "text-center",
    "background_color": "transparent",
    "background_offset": {"x": 50, "y": 50},
}


def banner_document(payload: BannerPayload) -> Dict[str, Any]:
    """
    Column values for a create or full replace

    Null/omitted styling falls back to STYLE_DEFAULTS and an empty
    layout becomes the starter layout.
    """
    data = payload.model_dump()
    for key, default in STYLE_DEFAULTS.items():
        if data.get(key) is None:
            data[key] = dict(default) if isinstance(default, dict) else default

    if not payload.layout:
        data["layout"] = [element.model_dump() for element in banner_layout.default_layout()]

    return data


class BannerService:
    """Service for banners and their editor layouts"""

    def __init__(self, banner_repository: Optional[BannerRepository] = None):
        self.banners = banner_repository or BannerRepository()

    def list_banners(self, active_only: bool = False) -> List[Banner]:
        return self.banners.find_all(active_only=active_only)

    def get_banner(self, banner_id: int) -> Banner:
        banner = self.banners.find_by_id(banner_id)
        if not banner:
            raise NotFoundError(f"Banner {banner_id} not found")
        return banner

    def create_banner(self, payload: BannerPayload) -> Banner:
        banner = self.banners.create(banner_document(payload))
        logger.info(f"Created banner {banner.id} ({banner.title})")
        return banner

    def replace_banner(self, banner_id: int, payload: BannerPayload) -> Banner:
        banner = self.banners.update(banner_id, banner_document(payload))
        if not banner:
            raise NotFoundError(f"Banner {banner_id} not found")
        return banner

    def delete_banner(self, banner_id: int) -> None:
        if not self.banners.delete(banner_id):
            raise NotFoundError(f"Banner {banner_id} not found")
        logger.info(f"Deleted banner {banner_id}")

    # Layout editing: load, apply a pure layout operation, persist

    def edit_layout(
        self,
        banner_id: int,
        operation: Callable[[List[BannerElement]], List[BannerElement]]
    ) -> Banner:
        banner = self.get_banner(banner_id)
        layout = operation(list(banner.layout))

        updated = self.banners.update(
            banner_id,
            {"layout": [element.model_dump() for element in layout]}
        )
        if not updated:
            raise NotFoundError(f"Banner {banner_id} not found")
        return updated

    def add_element(self, banner_id: int, element_type: str, element_id: Optional[str] = None) -> Banner:
        return self.edit_layout(
            banner_id,
            lambda layout: banner_layout.add_element(layout, element_type, element_id)
        )

    def update_element(self, banner_id: int, element_id: str, updates: Dict[str, Any]) -> Banner:
        return self.edit_layout(
            banner_id,
            lambda layout: banner_layout.update_element(layout, element_id, updates)
        )

    def move_element(self, banner_id: int, element_id: str, x: float, y: float) -> Banner:
        return self.edit_layout(
            banner_id,
            lambda layout: banner_layout.move_element(layout, element_id, x, y)
        )

    def resize_element(
        self,
        banner_id: int,
        element_id: str,
        width: float,
        height: float,
        x: Optional[float] = None,
        y: Optional[float] = None
    ) -> Banner:
        return self.edit_layout(
            banner_id,
            lambda layout: banner_layout.resize_element(layout, element_id, width, height, x, y)
        )

    def remove_element(self, banner_id: int, element_id: str) -> Banner:
        return self.edit_layout(
            banner_id,
            lambda layout: banner_layout.remove_element(layout, element_id)
        )

    def bring_to_front(self, banner_id: int, element_id: str) -> Banner:
        return self.edit_layout(
            banner_id,
            lambda layout: banner_layout.bring_to_front(layout, element_id)
        )

    def send_to_back(self, banner_id: int, element_id: str) -> Banner:
        return self.edit_layout(
            banner_id,
            lambda layout: banner_layout.send_to_back(layout, element_id)
        )

    def reset_layout(self, banner_id: int) -> Banner:
        return self.edit_layout(banner_id, lambda layout: banner_layout.default_layout())
