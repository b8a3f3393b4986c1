"""
Banner Repository - Data Access Layer for Banners

Layout and background offset are stored as JSONB documents.
"""
from typing import List, Optional, Dict, Any
from psycopg2.extras import Json

from stylehub.domain.banner import Banner
from stylehub.core.database import get_db_connection_dict


BANNER_COLUMNS = """
    id, title, subtitle, image_url, link_url, is_active, display_order,
    text_color, font_size, font_weight, font_style, text_align,
    background_color, layout, background_image, background_offset,
    created_at, updated_at
"""

WRITABLE_COLUMNS = (
    "title", "subtitle", "image_url", "link_url", "is_active", "display_order",
    "text_color", "font_size", "font_weight", "font_style", "text_align",
    "background_color", "layout", "background_image", "background_offset",
)

JSON_COLUMNS = ("layout", "background_offset")


def _adapt(column: str, value: Any) -> Any:
    if column in JSON_COLUMNS and value is not None:
        return Json(value)
    return value


class BannerRepository:
    """Repository for Banner data access"""

    @staticmethod
    def _map_row_to_banner(row: dict) -> Banner:
        data = dict(row)
        data['layout'] = data.get('layout') or []
        data['background_offset'] = data.get('background_offset') or {"x": 50, "y": 50}
        return Banner(**data)

    def find_all(self, active_only: bool = False) -> List[Banner]:
        """Banners in carousel order (display_order ascending)"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            where_clause = "is_active = TRUE" if active_only else "1=1"
            cursor.execute(f"""
                SELECT {BANNER_COLUMNS}
                FROM banners
                WHERE {where_clause}
                ORDER BY display_order ASC, id ASC
            """)

            return [self._map_row_to_banner(row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def find_by_id(self, banner_id: int) -> Optional[Banner]:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {BANNER_COLUMNS}
                FROM banners
                WHERE id = %s
            """, (banner_id,))

            row = cursor.fetchone()
            return self._map_row_to_banner(row) if row else None

        finally:
            cursor.close()
            conn.close()

    def create(self, data: Dict[str, Any]) -> Banner:
        """
        Insert a banner

        Args:
            data: Column values with defaults already applied; layout and
                background_offset as plain lists/dicts
        """
        columns = [c for c in WRITABLE_COLUMNS if c in data]
        placeholders = ", ".join(["%s"] * len(columns))

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                INSERT INTO banners ({", ".join(columns)}, created_at, updated_at)
                VALUES ({placeholders}, NOW(), NOW())
                RETURNING {BANNER_COLUMNS}
            """, [_adapt(c, data[c]) for c in columns])

            row = cursor.fetchone()
            conn.commit()
            return self._map_row_to_banner(row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def update(self, banner_id: int, updates: Dict[str, Any]) -> Optional[Banner]:
        """
        Set the supplied columns and updated_at

        Returns:
            Updated banner or None if not found
        """
        columns = [c for c in WRITABLE_COLUMNS if c in updates]

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            assignments = [f"{column} = %s" for column in columns]
            assignments.append("updated_at = NOW()")

            cursor.execute(f"""
                UPDATE banners
                SET {", ".join(assignments)}
                WHERE id = %s
                RETURNING {BANNER_COLUMNS}
            """, [_adapt(c, updates[c]) for c in columns] + [banner_id])

            row = cursor.fetchone()
            if not row:
                conn.rollback()
                return None

            conn.commit()
            return self._map_row_to_banner(row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def delete(self, banner_id: int) -> bool:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("DELETE FROM banners WHERE id = %s", (banner_id,))
            deleted = cursor.rowcount > 0
            conn.commit()
            return deleted

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
