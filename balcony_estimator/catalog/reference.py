"""
Material references.

The UI posts selected materials as composite keys
"{materialId}:{categoryTag}:{materialName}", where the category tag itself
contains colons ("Главная стена:Вид отделки"). Only the first segment is used
for lookup; the rest travels along for display and debugging.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MaterialRef:
    material_id: str
    category_tag: str = ""
    display_name: str = ""

    @classmethod
    def parse(cls, key) -> "MaterialRef":
        """Decode a composite key. Raises ValueError if no material id can be read."""
        if not isinstance(key, str) or key.strip() == "":
            raise ValueError("Material key must be a non-empty string")
        parts = key.split(":")
        material_id = parts[0].strip()
        if not material_id:
            raise ValueError(f"Material key has no id segment: {key!r}")
        if len(parts) >= 3:
            return cls(material_id, ":".join(parts[1:-1]), parts[-1])
        if len(parts) == 2:
            return cls(material_id, parts[1])
        return cls(material_id)

    def __str__(self) -> str:
        return ":".join(s for s in (self.material_id, self.category_tag, self.display_name) if s)
