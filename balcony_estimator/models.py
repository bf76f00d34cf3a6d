from sqlalchemy import Column, Integer, String, Float, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from .database import Base
import enum
import uuid


# --- Tabs (room sections) ---

class TabName(str, enum.Enum):
    MOVE_IN = "На заезд"
    GLAZING = "Остекление"
    MAIN_WALL = "Главная стена"
    FACADE_WALL = "Фасадная стена"
    BL_WALL = "БЛ стена"
    BP_WALL = "БП стена"
    CEILING = "Потолок"
    FLOOR = "Полы"
    ELECTRICAL = "Электрика"
    FURNITURE = "Мебель"
    EXTRA = "Доп. параметр"


# Sub-categories offered per tab. Category tags are "<tab>:<subcategory>".
# Hidden and per-variant tags ("<tab>:Скрытые", "Остекление:Окно:<variant>:Скрытые")
# are valid catalog tags too but are not picked by the customer directly.
TAB_SUBCATEGORIES = {
    TabName.MOVE_IN: ["Список на заезд", "Крепеж", "Плиточные работы", "Доп. параметр"],
    TabName.GLAZING: [
        "Что делаем",
        "Основная рама",
        "Наружная отделка",
        "Замена балконного блока",
        "Окно",
        "Откосы для окон",
        "Подоконники",
        "Крыша",
        "Доп. параметр",
    ],
    TabName.MAIN_WALL: ["Вид отделки", "Покраска стен", "Вид утепления", "Направление отделки", "Доп. параметр"],
    TabName.FACADE_WALL: ["Вид отделки", "Покраска стен", "Вид утепления", "Направление отделки", "Доп. параметр"],
    TabName.BL_WALL: ["Вид отделки", "Покраска стен", "Вид утепления", "Направление отделки", "Доп. параметр"],
    TabName.BP_WALL: ["Вид отделки", "Покраска стен", "Вид утепления", "Направление отделки", "Доп. параметр"],
    TabName.CEILING: ["Вид отделки", "Покраска потолка", "Вид утепления", "Направление отделки", "Доп. параметр"],
    TabName.FLOOR: ["Вид отделки", "Вид утепления", "Доп. параметр"],
    TabName.ELECTRICAL: ["Кабель", "Выключатель", "Розетка", "Спот", "Доп. параметр"],
    TabName.FURNITURE: [
        "Материал мебели",
        "Покраска мебели",
        "Полки Верх",
        "Полки Низ",
        "Бок у печки",
        "Столешница",
        "Доп. параметр",
    ],
    TabName.EXTRA: ["Доп. параметр"],
}


def get_subcategories(tab_name) -> list[str]:
    """Sub-categories for a tab, or [] when the tab is unknown."""
    try:
        tab = TabName(tab_name)
    except ValueError:
        return []
    return list(TAB_SUBCATEGORIES[tab])


# --- Catalog tables ---

class Material(Base):
    """Priced catalog entry. Dimensions are millimetres."""
    __tablename__ = "materials"

    id = Column(String, primary_key=True, index=True, default=lambda: uuid.uuid4().hex)
    name = Column(String(100), nullable=False)
    price = Column(Float, nullable=False, default=0.0)
    quantity = Column(Float, nullable=False, default=0.0)
    unit = Column(String(20), nullable=False)
    length_mm = Column(Float, nullable=True)
    width_mm = Column(Float, nullable=True)
    height_mm = Column(Float, nullable=True)
    color = Column(String(50), nullable=True)
    is_hidden = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    category_links = relationship(
        "MaterialCategory",
        back_populates="material",
        cascade="all, delete-orphan",
        order_by="MaterialCategory.position",
    )

    @property
    def categories(self) -> list[str]:
        return [link.category for link in self.category_links]

    @property
    def dimensions(self):
        if self.length_mm is None and self.width_mm is None:
            return None
        return {"length": self.length_mm, "width": self.width_mm, "height": self.height_mm}


class MaterialCategory(Base):
    """One category tag of a material (a material may carry several)."""
    __tablename__ = "material_categories"

    material_id = Column(String, ForeignKey("materials.id", ondelete="CASCADE"), primary_key=True)
    category = Column(String(200), primary_key=True, index=True)
    position = Column(Integer, default=0)

    material = relationship("Material", back_populates="category_links")
